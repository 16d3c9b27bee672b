"""
huekit Color Classes
====================

The immutable :class:`Color` value type plus the records and functions built
around it.

Features
--------
- Immutable color instances (frozen after initialization)
- Canonical RGBA storage, every channel an integer in [0, 255]
- HSL, HSV, hex and rgb()/rgba() views computed on demand
- Strict and lenient construction from hex, rgb()/rgba() strings, channel
  arrays, channel records and web color names
- Blend, lighten/darken, saturate/desaturate, grayscale and invert

Usage
-----
>>> from huekit.colors import hex_to_color, get_color
>>>
>>> red = hex_to_color("#FF0000")
>>> red.to_hsl()
Hsl(hue=0, saturation=100, luminance=50, alpha=255)
>>> red == get_color("red")
True
>>> red.with_alpha(128).to_hex()
'#80FF0000'
>>> red.lighten(20).to_hex()
'#FF3333'

Records
-------
    - Rgba: (red, green, blue, alpha), all 0-255
    - Hsl: hue in degrees, saturation/luminance in percent, alpha 0-255
    - Hsv: hue in degrees, saturation/value in percent, alpha 0-255

Notes
-----
- Channel values are clamped and floored when a color is built
- Results of HSL/HSV conversions and of ``blend`` round half up
- Alpha stays on the 0-255 scale in HSL and HSV too
"""

from .color_base import Color, clamp_channel
from .rgb import Rgba, rgb_to_color, rgb_to_hex, hex_to_rgb, color_to_rgba
from .hsl import Hsl, color_to_hsl, hsl_to_color
from .hsv import Hsv, color_to_hsv, hsv_to_color
from .color import (
    color_from,
    parse_strict,
    parse_lenient,
    hex_to_color,
    get_color,
    rgba_string_to_color,
    channels_to_color,
    get_hue,
    get_luminance,
    get_value_hsv,
    get_saturation,
    color_convert,
)
from .arithmetic import (
    blend,
    blend_hex,
    lighten,
    darken,
    saturate,
    desaturate,
    de_saturate,
    gray_scale,
    invert,
    set_channel,
)

__all__ = [
    'Color', 'clamp_channel',
    'Rgba', 'rgb_to_color', 'rgb_to_hex', 'hex_to_rgb', 'color_to_rgba',
    'Hsl', 'color_to_hsl', 'hsl_to_color',
    'Hsv', 'color_to_hsv', 'hsv_to_color',
    'color_from', 'parse_strict', 'parse_lenient',
    'hex_to_color', 'get_color', 'rgba_string_to_color', 'channels_to_color',
    'get_hue', 'get_luminance', 'get_value_hsv', 'get_saturation',
    'color_convert',
    'blend', 'blend_hex', 'lighten', 'darken',
    'saturate', 'desaturate', 'de_saturate', 'gray_scale', 'invert', 'set_channel',
]
