"""
Tagged input variants for color construction.

Each accepted input encoding has its own small frozen record so that a single
dispatcher (:func:`huekit.colors.color.color_from`) can build a color without
inspecting raw types. :func:`normalize_color_input` is the one place that does
inspect raw Python values, turning them into one of these variants.
"""
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Tuple, Union
import numpy as np

from ..colors.color_base import Color
from ..conversions.hex import is_valid_hex_color
from ..errors import FormatError
from ..types.color_types import Scalar
from ..types.format_type import CHANNEL_MAX


@dataclass(frozen=True)
class HexInput:
    text: str


@dataclass(frozen=True)
class RgbaStringInput:
    text: str


@dataclass(frozen=True)
class ChannelArrayInput:
    channels: Tuple[Scalar, ...]


@dataclass(frozen=True)
class ChannelRecordInput:
    """Unset color channels are 0; an unset alpha is opaque."""
    red: Scalar = 0
    green: Scalar = 0
    blue: Scalar = 0
    alpha: Scalar = CHANNEL_MAX


@dataclass(frozen=True)
class NamedColorInput:
    name: str


ColorInputVariant = Union[HexInput, RgbaStringInput, ChannelArrayInput, ChannelRecordInput, NamedColorInput]
ColorInput = Union[str, Color, Mapping, Tuple[Scalar, ...], list, np.ndarray, ColorInputVariant]

RECORD_FIELDS = ("red", "green", "blue", "alpha")
VARIANT_TYPES = (HexInput, RgbaStringInput, ChannelArrayInput, ChannelRecordInput, NamedColorInput)


def normalize_string_input(text: str) -> ColorInputVariant:
    stripped = text.strip()
    if stripped.lower().startswith("rgb"):
        return RgbaStringInput(stripped)
    if stripped.isalpha() and not is_valid_hex_color(stripped):
        return NamedColorInput(stripped)
    # anything else is held to the hex grammar and fails there
    return HexInput(stripped)


def normalize_record_input(record: Mapping) -> ChannelRecordInput:
    unknown = set(record) - set(RECORD_FIELDS)
    if unknown:
        raise FormatError(f"Unknown channel names: {sorted(unknown)!r}")
    return ChannelRecordInput(**record)


def normalize_color_input(color_input: ColorInput) -> ColorInputVariant:
    """
    Wrap a raw value into the matching input variant.

    Strings are classified as rgb()/rgba() notation, a color name (letters
    only) or hex. Sequences and 1-d arrays become channel arrays, mappings
    become channel records. Variants pass through unchanged.

    Raises:
        FormatError: for values no variant accepts
    """
    if isinstance(color_input, VARIANT_TYPES):
        return color_input
    if isinstance(color_input, Color):
        return ChannelArrayInput(color_input.value)
    if isinstance(color_input, str):
        return normalize_string_input(color_input)
    if isinstance(color_input, Mapping):
        return normalize_record_input(color_input)
    if isinstance(color_input, np.ndarray):
        if color_input.ndim != 1:
            raise FormatError("Input array must be 1-dimensional.")
        return ChannelArrayInput(tuple(color_input.tolist()))
    if isinstance(color_input, (tuple, list)):
        return ChannelArrayInput(tuple(color_input))
    raise FormatError(f"Unsupported color input type: {type(color_input).__name__}")
