import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import HSL, ColorLike, element_to_array, element_to_tuple
from ..types.format_type import CHANNEL_MAX, HUE_SECTORS
from ..utils.num_utils import to_unit


def rgb_to_hsl(rgba: ColorLike) -> HSL:
    """
    Convert RGB(A) to HSL. The alpha channel, if any, is ignored.

    Args:
        rgba: (r, g, b) or (r, g, b, a) with channels in [0, 255]

    Returns:
        Tuple[float, float, float]: (h, s, l) in [0, 1]
    """
    r, g, b = (max(0, min(v, CHANNEL_MAX)) / CHANNEL_MAX for v in element_to_tuple(rgba, 3))
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        # Achromatic
        return 0.0, 0.0, to_unit(l)

    d = max_c - min_c
    s = d / (1 - abs(2 * l - 1))

    if max_c == r:
        h = ((g - b) / d) % HUE_SECTORS
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return to_unit(h / HUE_SECTORS), to_unit(s), to_unit(l)


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB(A) to HSL.

    Args:
        rgb: array-like of shape (..., 3) or (..., 4), channels in [0, 255]

    Returns:
        hsl: float array of shape (..., 3), components in [0, 1]
    """
    rgb = np.clip(element_to_array(rgb)[..., :3], 0, CHANNEL_MAX) / CHANNEL_MAX
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    d = max_c - min_c
    l = (max_c + min_c) / 2

    chromatic = d > 0
    # Keep the divisions finite where the color is achromatic
    safe_d = np.where(chromatic, d, 1.0)
    safe_den = np.where(chromatic, 1 - np.abs(2 * l - 1), 1.0)

    s = np.where(chromatic, d / safe_den, 0.0)
    h = np.where(
        max_c == r,
        ((g - b) / safe_d) % HUE_SECTORS,
        np.where(max_c == g, (b - r) / safe_d + 2, (r - g) / safe_d + 4),
    )
    h = np.where(chromatic, h / HUE_SECTORS, 0.0)

    return np.clip(np.stack([h, s, l], axis=-1), 0.0, 1.0)


rgb2hsl = rgb_to_hsl
