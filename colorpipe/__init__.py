"""colorpipe: pure, pipe-friendly color manipulation."""
import logging

from .exceptions import ColorPipeError, InvalidArgument, ParseError
from .types.color_types import RGB, RGBA, HSL
from .conversions import (
    hsl_to_rgb,
    rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
    hsl_to_rgba,
    hsl2rgb,
    rgb2hsl,
)
from .adjust import luminosity, np_luminosity, with_alpha
from .formats import (
    import_color,
    import_hex,
    parse_hex,
    color_to_str,
    color_to_hex,
    color2str,
)
from .utils.pipe import pipe, compose

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # errors
    "ColorPipeError",
    "InvalidArgument",
    "ParseError",

    # color models
    "RGB",
    "RGBA",
    "HSL",

    # conversions
    "hsl_to_rgb",
    "rgb_to_hsl",
    "np_hsl_to_rgb",
    "np_rgb_to_hsl",
    "hsl_to_rgba",
    "hsl2rgb",
    "rgb2hsl",

    # adjustments
    "luminosity",
    "np_luminosity",
    "with_alpha",

    # import / formatting
    "import_color",
    "import_hex",
    "parse_hex",
    "color_to_str",
    "color_to_hex",
    "color2str",

    # composition
    "pipe",
    "compose",
]
