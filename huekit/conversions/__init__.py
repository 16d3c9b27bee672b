"""
huekit Color Space Conversions
==============================

Float conversion kernels between RGB, HSL and HSV, with scalar and vectorized
(numpy) implementations, plus the text codecs for hex and rgb()/rgba().

Conversion Functions
--------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Scalar RGB to HSL conversion
    np_unit_rgb_to_hsl(r, g, b)
        Vectorized RGB to HSL conversion

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
    np_hsv_to_unit_rgb(h, s, v)

Kernels take and return unit floats ([0, 1]) except hue, which is always in
degrees [0, 360).

High-Level API
--------------
    convert(color, from_space, to_space)
        Universal converter on native scales (0-255 RGB, degrees + percent)
    np_convert(color, from_space, to_space)
        Vectorized universal converter

Text Codecs
-----------
    is_valid_hex_color(text), parse_hex(text), format_hex(r, g, b, a)
    parse_rgba_string(text), format_rgba_string(r, g, b, a)

Examples
--------
>>> from huekit.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
>>> convert((255, 0, 0), "rgb", "hsl")
(0.0, 100.0, 50.0)
"""

from .to_hsl import (
    unit_rgb_to_hue,
    unit_rgb_to_hsl,
    np_unit_rgb_to_hue,
    np_unit_rgb_to_hsl,
)

from .to_hsv import (
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
)

from .to_rgb import (
    hue_to_channel,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
)

from .hex import (
    is_valid_hex_color,
    parse_hex,
    format_hex,
    parse_rgba_string,
    format_rgba_string,
)

from .wrapper import convert, np_convert

__all__ = [
    # RGB → HSL / HSV
    'unit_rgb_to_hue',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hue',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSL / HSV → RGB
    'hue_to_channel',
    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # Text codecs
    'is_valid_hex_color',
    'parse_hex',
    'format_hex',
    'parse_rgba_string',
    'format_rgba_string',

    # High-level API
    'convert',
    'np_convert',
]
