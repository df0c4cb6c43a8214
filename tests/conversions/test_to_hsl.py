import numpy as np
import pytest
from colorpipe.conversions.to_hsl import rgb_to_hsl, np_rgb_to_hsl, rgb2hsl
from ..samples import samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl((r, g, b, 1))

        assert abs(h - h_exp) < 1e-4
        assert abs(s - s_exp) < 1e-4
        assert abs(l - l_exp) < 1e-4


def test_rgb_to_hsl_known_colors():
    h, s, l = rgb_to_hsl([210, 120, 80, 1])
    assert h == pytest.approx(0.05, abs=0.005)
    assert s == pytest.approx(0.59, abs=0.005)
    assert l == pytest.approx(0.57, abs=0.005)

    h, s, l = rgb_to_hsl([255, 0, 0, 1])
    assert h == pytest.approx(0, abs=0.001)
    assert s == pytest.approx(1, abs=0.005)
    assert l == pytest.approx(0.5, abs=0.005)

    h, s, l = rgb_to_hsl([0, 255, 0, 1])
    assert h == pytest.approx(0.33, abs=0.005)


def test_rgb_to_hsl_ignores_alpha():
    assert rgb_to_hsl((210, 120, 80, 0.1)) == rgb_to_hsl((210, 120, 80, 1))
    assert rgb_to_hsl((210, 120, 80)) == rgb_to_hsl((210, 120, 80, 1))
    assert len(rgb_to_hsl((210, 120, 80, 0.1))) == 3


def test_rgb_to_hsl_achromatic():
    for v in (0, 1, 64, 200, 255):
        h, s, l = rgb_to_hsl((v, v, v, 1))
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(v / 255)


def test_rgb_to_hsl_components_in_range():
    for r in range(0, 256, 51):
        for g in range(0, 256, 17):
            for b in range(0, 256, 85):
                for component in rgb_to_hsl((r, g, b, 1)):
                    assert 0.0 <= component <= 1.0


def test_rgb2hsl_alias():
    assert rgb2hsl is rgb_to_hsl


def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgb_to_hsl(the_matrix)
    assert np.allclose(result, expected, atol=1e-4)


def test_rgb_to_hsl_numpy_with_alpha_column():
    rgba = np.array([[210, 120, 80, 0.3], [0, 0, 0, 1.0]])
    result = np_rgb_to_hsl(rgba)
    assert result.shape == (2, 3)
    assert np.allclose(result[0], rgb_to_hsl((210, 120, 80)))
    assert np.allclose(result[1], (0.0, 0.0, 0.0))
