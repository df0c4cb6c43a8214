"""
colorpipe Color Model Conversions
=================================

RGB(A) <-> HSL conversion with scalar and vectorized (numpy) implementations.

Conventions
-----------
- RGB channels are integers in [0, 255]; alpha is a real in [0, 1]
- HSL components are reals in [0, 1]; hue is a fraction of the color wheel
  (0 = red, 1/3 = green, 2/3 = blue)
- RGB results are rounded half away from zero and clamped

Conversion Functions
--------------------

HSL -> RGB:
    hsl_to_rgb(hsl)
        Scalar conversion, returns (r, g, b)
    np_hsl_to_rgb(hsl)
        Vectorized conversion over (..., 3) arrays
    hsl_to_rgba(alpha[, hsl])
        Conversion with an attached alpha; curry-capable pipeline stage

RGB -> HSL:
    rgb_to_hsl(rgba)
        Scalar conversion, alpha is ignored
    np_rgb_to_hsl(rgb)
        Vectorized conversion over (..., 3) or (..., 4) arrays

Examples
--------
>>> from colorpipe.conversions import hsl_to_rgb, rgb_to_hsl
>>> hsl_to_rgb((0.5, 0.5, 0.5))
(64, 191, 191)
>>> h, s, l = rgb_to_hsl((255, 0, 0, 1))
>>> (h, s, l)
(0.0, 1.0, 0.5)
"""

# HSL -> RGB conversions
from .to_rgb import (
    hsl_to_rgb,
    np_hsl_to_rgb,
    hsl_to_rgba,
    hsl2rgb,
)

# RGB -> HSL conversions
from .to_hsl import (
    rgb_to_hsl,
    np_rgb_to_hsl,
    rgb2hsl,
)

__all__ = [
    # HSL -> RGB
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'hsl_to_rgba',
    'hsl2rgb',

    # RGB -> HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'rgb2hsl',
]
