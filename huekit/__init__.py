"""huekit: 8-bit sRGB color conversion and manipulation."""

# colors must load before normalizers; the normalizer imports Color
from .colors import (
    Color,
    Rgba,
    Hsl,
    Hsv,
    color_from,
    parse_strict,
    parse_lenient,
    hex_to_color,
    get_color,
    rgba_string_to_color,
    channels_to_color,
    rgb_to_color,
    rgb_to_hex,
    hex_to_rgb,
    color_to_hsl,
    hsl_to_color,
    color_to_hsv,
    hsv_to_color,
    get_hue,
    get_luminance,
    get_value_hsv,
    get_saturation,
    blend,
    blend_hex,
    lighten,
    darken,
    saturate,
    desaturate,
    gray_scale,
    invert,
    set_channel,
)
from .normalizers import (
    HexInput,
    RgbaStringInput,
    ChannelArrayInput,
    ChannelRecordInput,
    NamedColorInput,
    normalize_color_input,
)
from .conversions import (
    is_valid_hex_color,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    convert,
    np_convert,
)
from .errors import ColorError, FormatError, UnknownColorNameError
from .named_colors import NAMED_COLORS
from .types.color_types import Channel, RgbColorModel

__version__ = "1.0.0"

__all__ = [
    # core color type and records
    "Color",
    "Rgba",
    "Hsl",
    "Hsv",
    "Channel",
    "RgbColorModel",
    # construction
    "color_from",
    "parse_strict",
    "parse_lenient",
    "hex_to_color",
    "get_color",
    "rgba_string_to_color",
    "channels_to_color",
    "rgb_to_color",
    "HexInput",
    "RgbaStringInput",
    "ChannelArrayInput",
    "ChannelRecordInput",
    "NamedColorInput",
    "normalize_color_input",
    "is_valid_hex_color",
    "NAMED_COLORS",
    # views and component readers
    "rgb_to_hex",
    "hex_to_rgb",
    "color_to_hsl",
    "hsl_to_color",
    "color_to_hsv",
    "hsv_to_color",
    "get_hue",
    "get_luminance",
    "get_value_hsv",
    "get_saturation",
    # operations
    "blend",
    "blend_hex",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "gray_scale",
    "invert",
    "set_channel",
    # conversions
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "hsl_to_unit_rgb",
    "hsv_to_unit_rgb",
    "np_unit_rgb_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_hsl_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "convert",
    "np_convert",
    # errors
    "ColorError",
    "FormatError",
    "UnknownColorNameError",
    "__version__",
]
