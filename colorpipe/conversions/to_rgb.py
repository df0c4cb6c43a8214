import numpy as np
from numpy import ndarray as NDArray
from ..adjust.alpha import validate_alpha
from ..types.color_types import RGB, RGBA, ColorLike, Scalar, element_to_array, element_to_tuple
from ..types.format_type import CHANNEL_MAX, HUE_SECTORS
from ..utils.curry import data_last
from ..utils.num_utils import clamp_channel, np_clamp_channels


def _sector_fractions(sector: int, c: float, x: float) -> tuple[float, float, float]:
    if sector == 0:
        return c, x, 0.0
    elif sector == 1:
        return x, c, 0.0
    elif sector == 2:
        return 0.0, c, x
    elif sector == 3:
        return 0.0, x, c
    elif sector == 4:
        return x, 0.0, c
    return c, 0.0, x


def hsl_to_rgb(hsl: ColorLike) -> RGB:
    """
    Convert HSL to integer RGB.

    Args:
        hsl: (h, s, l), each in [0, 1]; h is a fraction of the color wheel

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    h, s, l = (max(0.0, min(float(v), 1.0)) for v in element_to_tuple(hsl, 3))

    c = (1 - abs(2 * l - 1)) * s
    h6 = h * HUE_SECTORS
    x = c * (1 - abs(h6 % 2 - 1))
    m = l - c / 2

    # h == 1 is the same hue as h == 0
    sector = int(h6) % HUE_SECTORS
    r, g, b = _sector_fractions(sector, c, x)

    return (
        clamp_channel((r + m) * CHANNEL_MAX),
        clamp_channel((g + m) * CHANNEL_MAX),
        clamp_channel((b + m) * CHANNEL_MAX),
    )


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to integer RGB.

    Args:
        hsl: array-like of shape (..., 3), components in [0, 1]

    Returns:
        rgb: int array of shape (..., 3), channels in [0, 255]
    """
    hsl = np.clip(element_to_array(hsl)[..., :3], 0.0, 1.0)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]

    c = (1 - np.abs(2 * l - 1)) * s
    h6 = h * HUE_SECTORS
    x = c * (1 - np.abs(h6 % 2 - 1))
    m = l - c / 2
    zeros = np.zeros_like(c)

    sector = np.floor(h6).astype(int) % HUE_SECTORS
    masks = [sector == i for i in range(HUE_SECTORS)]

    r = np.select(masks, [c, x, zeros, zeros, x, c])
    g = np.select(masks, [x, c, c, x, zeros, zeros])
    b = np.select(masks, [zeros, zeros, x, c, c, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1) * CHANNEL_MAX
    return np_clamp_channels(rgb)


@data_last(1, validate=validate_alpha)
def hsl_to_rgba(alpha: Scalar, hsl: ColorLike) -> RGBA:
    """Convert HSL to RGB and attach ``alpha``."""
    r, g, b = hsl_to_rgb(hsl)
    return (r, g, b, alpha)


hsl2rgb = hsl_to_rgb
