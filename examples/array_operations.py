"""Array-friendly color utilities in colorpipe.

Run with:
    python examples/array_operations.py
"""
import numpy as np

from colorpipe import np_hsl_to_rgb, np_rgb_to_hsl, np_luminosity


def demonstrate_arrays() -> None:
    # A full hue ring at constant saturation and lightness.
    hues = np.linspace(0.0, 1.0, 12, endpoint=False)
    ring = np.stack([hues, np.full_like(hues, 0.8), np.full_like(hues, 0.5)], axis=-1)
    rgb = np_hsl_to_rgb(ring)
    print("Hue ring (RGB):", rgb.tolist())

    # Attach an alpha column and dim the whole ring at once.
    rgba = np.concatenate([rgb, np.full((len(rgb), 1), 0.5)], axis=-1)
    dimmed = np_luminosity(0.5, rgba)
    print("Dimmed lightness:", np_rgb_to_hsl(dimmed)[..., 2].round(3).tolist())


if __name__ == "__main__":
    demonstrate_arrays()
