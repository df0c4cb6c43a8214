import numbers
import math
import numpy as np
from numpy import ndarray as NDArray
from ..exceptions import InvalidArgument
from ..types.color_types import RGBA, ColorLike, Scalar, element_to_array, element_to_tuple
from ..utils.curry import data_last
from ..utils.num_utils import clamp_channel, np_clamp_channels


def validate_factor(factor: Scalar) -> None:
    if isinstance(factor, bool) or not isinstance(factor, numbers.Real):
        raise InvalidArgument(f"Luminosity factor must be a number, got {factor!r}")
    if math.isnan(factor) or math.isinf(factor):
        raise InvalidArgument(f"Luminosity factor must be finite, got {factor!r}")
    if factor < 0:
        raise InvalidArgument(f"Luminosity factor must not be negative, got {factor!r}")


@data_last(1, validate=validate_factor)
def luminosity(factor: Scalar, rgba: ColorLike) -> RGBA:
    """
    Scale the r, g, b channels by ``factor``.

    Channels are rounded half away from zero and clamped into [0, 255];
    alpha is passed through unchanged.

    Args:
        factor: Non-negative scale; 1 keeps the color, 0 gives black
        rgba: (r, g, b, a)

    Returns:
        New (r, g, b, a) tuple
    """
    r, g, b, a = element_to_tuple(rgba, 4)
    return (
        clamp_channel(r * factor),
        clamp_channel(g * factor),
        clamp_channel(b * factor),
        a,
    )


@data_last(1, validate=validate_factor)
def np_luminosity(factor: Scalar, rgba: NDArray) -> NDArray:
    """
    Vectorized: scale the first three channels of a (..., 4) array.

    Returns:
        float array of shape (..., 4); r, g, b hold whole numbers in [0, 255]
    """
    rgba = element_to_array(rgba)
    if rgba.shape[-1] != 4:
        raise ValueError(f"Expected last dimension to be 4, got shape {rgba.shape}")
    channels = np_clamp_channels(rgba[..., :3] * factor)
    return np.concatenate([channels, rgba[..., 3:]], axis=-1)
