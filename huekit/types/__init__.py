from .color_types import Channel, RgbColorModel, ColorSpace
from .format_type import ScaleType, CHANNEL_MAX, PERCENT_MAX, HUE_360, EPSILON

__all__ = [
    "Channel",
    "RgbColorModel",
    "ColorSpace",
    "ScaleType",
    "CHANNEL_MAX",
    "PERCENT_MAX",
    "HUE_360",
    "EPSILON",
]
