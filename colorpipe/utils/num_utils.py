import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat
from ..types.format_type import CHANNEL_MAX


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def np_round_half_away(values: NDArray) -> NDArray:
    """Vectorized: round to the nearest integer, ties away from zero."""
    values = np.asarray(values, dtype=float)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def clamp_channel(value: float) -> int:
    """Round a channel value and clamp it into [0, 255]."""
    return max(0, min(round_half_away(value), CHANNEL_MAX))


def np_clamp_channels(values: NDArray) -> NDArray:
    """Vectorized: round channel values and clamp them into [0, 255]."""
    return np.clip(np_round_half_away(values), 0, CHANNEL_MAX).astype(int)


def to_unit(value: float) -> float:
    """Clamp a value into [0, 1] and return it as a plain float."""
    return float(UnitFloat(float(value)))
