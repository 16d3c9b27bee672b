from __future__ import annotations
import math
from typing import Any, Callable, Optional, Tuple

from boundednumbers.functions import clamp

from ..conversions.hex import format_hex, format_rgba_string
from ..errors import FormatError
from ..types.color_types import ChannelVector, ColorSpace, Scalar
from ..types.format_type import CHANNEL_MAX


def _as_number(value: Scalar, label: str) -> float:
    if isinstance(value, str):
        raise FormatError(f"{label} value {value!r} is not a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise FormatError(f"{label} value {value!r} is not a number") from exc
    if math.isnan(number):
        raise FormatError(f"{label} value must not be NaN")
    return number


def clamp_channel(value: Scalar) -> int:
    """Clamp a channel to [0, 255] and truncate it to an integer."""
    return int(math.floor(clamp(_as_number(value, "Channel"), 0.0, CHANNEL_MAX)))


def finite_component(value: Scalar, label: str) -> float:
    """
    Check an HSL/HSV component before conversion.

    Raises:
        FormatError: if ``value`` is not a number, NaN or infinite
    """
    number = _as_number(value, label)
    if math.isinf(number):
        raise FormatError(f"{label} value must be finite, got {number}")
    return number


class Color:
    """
    An immutable 8-bit sRGB color.

    The canonical state is the ``(red, green, blue, alpha)`` tuple; HSL, HSV,
    hex and rgba-string forms are computed from it on demand. Every channel
    given to the constructor is clamped to [0, 255] and floored.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    # attached by .color and .arithmetic
    convert: Callable[..., Tuple[Scalar, ...]]
    to_hsl: Callable[..., Any]
    to_hsv: Callable[..., Any]
    to_rgba: Callable[[Color], Any]
    blend: Callable[..., Optional[Color]]
    lighten: Callable[[Color, float], Color]
    darken: Callable[[Color, float], Color]
    saturate: Callable[[Color, float], Color]
    desaturate: Callable[[Color, float], Color]
    gray_scale: Callable[[Color], Color]
    invert: Callable[[Color], Color]
    set_channel: Callable[..., Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar = 0, green: Scalar = 0, blue: Scalar = 0, alpha: Scalar = CHANNEL_MAX) -> None:
        self._value = (
            clamp_channel(red),
            clamp_channel(green),
            clamp_channel(blue),
            clamp_channel(alpha),
        )
        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelVector:
        return self._value

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> int:
        return self._value[3]

    @property
    def mode(self) -> ColorSpace:
        return "rgba"

    @property
    def is_opaque(self) -> bool:
        return self.alpha == CHANNEL_MAX

    # ------------------ VIEWS ------------------
    def to_hex(self) -> str:
        """``#RRGGBB`` when opaque, ``#AARRGGBB`` otherwise."""
        return format_hex(*self._value)

    def to_rgba_string(self) -> str:
        return format_rgba_string(*self._value)

    # ------------------ DERIVED COPIES ------------------
    def with_channels(
        self,
        red: Optional[Scalar] = None,
        green: Optional[Scalar] = None,
        blue: Optional[Scalar] = None,
        alpha: Optional[Scalar] = None,
    ) -> Color:
        """
        Return a copy with some channels replaced.

        A channel left as ``None`` keeps its current value; given values are
        clamped like in the constructor.
        """
        return self.__class__(
            self.red if red is None else red,
            self.green if green is None else green,
            self.blue if blue is None else blue,
            self.alpha if alpha is None else alpha,
        )

    def with_alpha(self, alpha: Scalar) -> Color:
        return self.with_channels(alpha=alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __iter__(self):
        return iter(self._value)

    def __repr__(self):
        red, green, blue, alpha = self._value
        return f"{self.__class__.__name__}(red={red}, green={green}, blue={blue}, alpha={alpha})"
