"""Basic colorpipe usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from colorpipe import (
    pipe,
    compose,
    import_color,
    luminosity,
    color_to_str,
    color_to_hex,
    hsl_to_rgb,
    hsl_to_rgba,
    rgb_to_hsl,
)


def demonstrate_conversions() -> None:
    # Round trip between the two color models.
    h, s, l = rgb_to_hsl((210, 120, 80, 1))
    print(f"RGB -> HSL: ({h:.3f}, {s:.3f}, {l:.3f})")
    print("HSL -> RGB:", hsl_to_rgb((h, s, l)))


def demonstrate_pipelines() -> None:
    # Every operation doubles as a pipeline stage when its color is left out.
    css = pipe("#58D68D", import_color(0.7), luminosity(1.5), color_to_str())
    print("Brightened:", css)

    # Stages can be bundled and reused.
    shade = compose(luminosity(0.6), color_to_hex())
    for hsl in [(0.0, 1.0, 0.5), (1 / 3, 1.0, 0.5), (2 / 3, 1.0, 0.5)]:
        print("Shade of", hsl, "->", pipe(hsl, hsl_to_rgba(1), shade))


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_pipelines()
