"""Basic Chromaline usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaline import (
    Cartesian,
    Easing,
    Palette,
    PaletteConfig,
    interpolate,
    point_to_hsl,
)


def demonstrate_coordinates() -> None:
    # Points on the rim of the cylinder have lightness 1.0.
    print("Point on the rim:", point_to_hsl(1.0, 0.5, 0.3))

    line = interpolate((0.1, 0.5, 0.2), (0.9, 0.5, 0.8), 5, Easing.SINUSOIDAL)
    print("Eased line:", line)


def demonstrate_palettes() -> None:
    palette = Palette([(20, 0.8, 0.3), (200, 0.4, 0.9)], num_points=6, easing=Easing.ARC)
    print(palette)
    print("CSS:", palette.colors_css)

    # Extend and edit the palette; segments are rebuilt on every change.
    palette.add_anchor_point(color=(300, 0.6, 0.5))
    palette.replace_anchor(0, Cartesian(0.5, 0.9, 0.4))
    print("After edits:", len(palette), "colors")

    nearest = palette.get_closest_anchor((0.5, 0.85, 0.4), max_distance=0.2)
    print("Nearest anchor:", nearest)


def demonstrate_random() -> None:
    config = PaletteConfig(num_points=4, easing="circular", min_hue_diff=120)
    palette = Palette.from_config(config)
    for css in palette.colors_css:
        print(css)


if __name__ == "__main__":
    demonstrate_coordinates()
    demonstrate_palettes()
    demonstrate_random()
