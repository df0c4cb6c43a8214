from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, Scalar]
HSL = Tuple[float, float, float]
ColorLike = Union[Sequence[Scalar], ndarray]  # Any sequence readable as a color


def element_to_tuple(element: ColorLike, channels: int) -> Tuple[Scalar, ...]:
    """
    Read the first ``channels`` components of a color-like value.

    Args:
        element: List, tuple or 1-D ndarray
        channels: Number of leading components to take

    Returns:
        Tuple of python scalars
    """
    if isinstance(element, ndarray):
        element = element.tolist()
    if len(element) < channels:
        raise ValueError(f"Expected at least {channels} channels, got {len(element)}")
    return tuple(element[:channels])


def element_to_array(element: ColorLike) -> np.ndarray:
    """
    Convert a color element (or a stack of them) to a float numpy array.
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
