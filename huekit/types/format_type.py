# No dependencies
from enum import Enum


class ScaleType(str, Enum):
    CHANNEL = "channel"
    UNIT = "unit"
    PERCENTAGE = "percentage"


CHANNEL_MAX = 255
PERCENT_MAX = 100
HUE_360 = 360

# below this (unit scale) a saturation counts as achromatic
EPSILON = 0.0001

max_non_hue = {
    ScaleType.CHANNEL: CHANNEL_MAX,
    ScaleType.UNIT: 1.0,
    ScaleType.PERCENTAGE: PERCENT_MAX,
}

# native scale of the non-hue channels for each color space
space_scales = {
    "rgb": ScaleType.CHANNEL,
    "hsl": ScaleType.PERCENTAGE,
    "hsv": ScaleType.PERCENTAGE,
}
