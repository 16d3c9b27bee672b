from __future__ import annotations
from enum import IntEnum
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelVector = Tuple[int, int, int, int]
ColorElement = Union[Scalar, ScalarVector]
ColorSpace = Literal["rgb", "rgba", "hsv", "hsva", "hsl", "hsla"]
HUE_SPACES = {"hsl", "hsla", "hsv", "hsva"}


class Channel(IntEnum):
    """Index of a channel inside the canonical RGBA tuple."""
    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


class RgbColorModel(IntEnum):
    """Cylindrical model used when a saturation is asked for.

    HSL: hue, saturation, lightness (luminance)
    HSV: hue, saturation, value (brightness)
    """
    HSL = 0
    HSV = 1


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element])
    return np.array(element)


def is_hue_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
