"""Basic huekit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from huekit import (
    Color,
    hex_to_color,
    get_color,
    parse_lenient,
    blend_hex,
    np_convert,
)


def demonstrate_colors() -> None:
    # Build colors from the different input forms and read their views.
    accent = hex_to_color("#FF8040")
    print("Hex -> HSL:", accent.to_hsl())
    print("Hex -> HSV:", accent.to_hsv())
    print("rgba() string:", accent.with_alpha(128).to_rgba_string())

    print("Named color:", get_color("cornflowerblue").to_hex())
    print("Lenient parse of garbage:", parse_lenient("not-a-color"))
    print("Record input:", Color(red=12, blue=200))


def demonstrate_operations() -> None:
    base = get_color("steelblue")
    print("Lighten 20:", base.lighten(20).to_hex())
    print("Darken 20:", base.darken(20).to_hex())
    print("Saturate 30:", base.saturate(30).to_hex())
    print("Grayscale:", base.gray_scale().to_hex())
    print("Invert:", base.invert().to_hex())
    print("Blend with white:", blend_hex(base.to_hex(), "#FFFFFF", 50))


def demonstrate_arrays() -> None:
    # Vectorized conversion over an image-shaped array.
    image = np.random.default_rng(0).integers(0, 256, size=(4, 4, 3))
    hsv = np_convert(image, "rgb", "hsv")
    print("HSV image shape:", hsv.shape)
    print("Back to RGB matches:", np.array_equal(np_convert(hsv, "hsv", "rgb"), image))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_operations()
    demonstrate_arrays()
