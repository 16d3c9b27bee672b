from .color_normalizer import (
    HexInput,
    RgbaStringInput,
    ChannelArrayInput,
    ChannelRecordInput,
    NamedColorInput,
    ColorInput,
    ColorInputVariant,
    normalize_color_input,
)

__all__ = [
    "HexInput",
    "RgbaStringInput",
    "ChannelArrayInput",
    "ChannelRecordInput",
    "NamedColorInput",
    "ColorInput",
    "ColorInputVariant",
    "normalize_color_input",
]
