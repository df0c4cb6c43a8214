import numpy as np
import pytest
from colorpipe.conversions.to_rgb import hsl_to_rgb, np_hsl_to_rgb, hsl_to_rgba, hsl2rgb
from colorpipe.exceptions import InvalidArgument
from ..samples import samples_hsl_rgb


def test_hsl_to_rgb():
    for hsl, expected in samples_hsl_rgb.items():
        assert hsl_to_rgb(hsl) == expected


def test_hsl_to_rgb_returns_ints():
    r, g, b = hsl_to_rgb((0.036, 0.23, 0.23))
    assert all(type(v) is int for v in (r, g, b))


def test_hsl_to_rgb_accepts_list_and_array():
    assert hsl_to_rgb([0.5, 0.5, 0.5]) == (64, 191, 191)
    assert hsl_to_rgb(np.array([0.5, 0.5, 0.5])) == (64, 191, 191)


def test_hsl_to_rgb_clamps_out_of_range_input():
    assert hsl_to_rgb((0.0, 2.0, 0.5)) == (255, 0, 0)
    assert hsl_to_rgb((0.0, 0.0, -1.0)) == (0, 0, 0)


def test_hsl_to_rgb_channels_in_range():
    steps = np.linspace(0.0, 1.0, 11)
    for h in steps:
        for s in steps:
            for l in steps:
                for v in hsl_to_rgb((h, s, l)):
                    assert 0 <= v <= 255


def test_hsl2rgb_alias():
    assert hsl2rgb is hsl_to_rgb


def test_hsl_to_rgb_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    expected = np.array(list(samples_hsl_rgb.values()))
    result = np_hsl_to_rgb(the_matrix)
    assert result.shape == expected.shape
    assert np.array_equal(result, expected)


def test_hsl_to_rgb_numpy_matches_scalar():
    steps = np.linspace(0.0, 1.0, 9)
    grid = np.stack(np.meshgrid(steps, steps, steps, indexing="ij"), axis=-1)
    result = np_hsl_to_rgb(grid)
    assert result.shape == (9, 9, 9, 3)
    assert np.issubdtype(result.dtype, np.integer)
    assert result.min() >= 0 and result.max() <= 255
    for idx in [(0, 0, 0), (3, 4, 5), (8, 8, 4), (2, 8, 4), (6, 3, 7)]:
        assert tuple(result[idx]) == hsl_to_rgb(grid[idx])


def test_hsl_to_rgba():
    assert hsl_to_rgba(0.5, (0.0, 1.0, 0.5)) == (255, 0, 0, 0.5)
    stage = hsl_to_rgba(1)
    assert stage((2 / 3, 1.0, 0.5)) == (0, 0, 255, 1)


def test_hsl_to_rgba_rejects_bad_alpha():
    with pytest.raises(InvalidArgument):
        hsl_to_rgba(1.5)
    with pytest.raises(InvalidArgument):
        hsl_to_rgba(-0.1, (0.0, 1.0, 0.5))
