import numpy as np
import pytest
from colorpipe.utils.num_utils import (
    round_half_away,
    np_round_half_away,
    clamp_channel,
    np_clamp_channels,
    to_unit,
)


@pytest.mark.parametrize("value, expected", [
    (2.5, 3),
    (-2.5, -3),
    (0.5, 1),
    (1.4999, 1),
    (211.5, 212),
    (63.75, 64),
    (0.0, 0),
])
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_np_round_half_away():
    values = np.array([0.5, 1.5, 2.5, -0.5, 191.25])
    assert np.array_equal(np_round_half_away(values), [1, 2, 3, -1, 191])


@pytest.mark.parametrize("value, expected", [
    (-3, 0),
    (0, 0),
    (127.5, 128),
    (255, 255),
    (300.2, 255),
])
def test_clamp_channel(value, expected):
    assert clamp_channel(value) == expected


def test_np_clamp_channels():
    result = np_clamp_channels(np.array([-3.0, 127.5, 300.0]))
    assert np.array_equal(result, [0, 128, 255])
    assert np.issubdtype(result.dtype, np.integer)


def test_to_unit():
    assert to_unit(1.2) == 1.0
    assert to_unit(-0.2) == 0.0
    assert to_unit(0.25) == 0.25
    assert type(to_unit(0.25)) is float


def test_to_unit_clamps_through_unit_float():
    assert to_unit(1.5) == 1.0
    assert to_unit(-0.5) == 0.0
    assert to_unit(1) == 1.0
