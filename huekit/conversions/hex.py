"""Text codecs for the hex and rgb()/rgba() notations."""

import re
from typing import Tuple

from ..errors import FormatError
from ..types.format_type import CHANNEL_MAX
from ..utils.num_utils import round_half_up

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
RGBA_PATTERN = re.compile(r"^rgba?\((.*)\)$", re.IGNORECASE | re.DOTALL)
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def is_valid_hex_color(text: str) -> bool:
    """Check if ``text`` is ``#RRGGBB`` or ``#AARRGGBB`` (``#`` optional)."""
    if not isinstance(text, str):
        return False
    return HEX_PATTERN.match(text.strip()) is not None


def parse_hex(text: str) -> Tuple[int, int, int, int]:
    """
    Parse a hex color into ``(red, green, blue, alpha)``.

    The 8-digit form carries alpha first (``AARRGGBB``); the 6-digit form
    is opaque.

    Raises:
        FormatError: if ``text`` is not a 6 or 8 digit hex color
    """
    if not is_valid_hex_color(text):
        raise FormatError(f"{text!r} is invalid hex color format")

    digits = text.strip().lstrip("#")
    values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]

    if len(values) == 3:
        red, green, blue = values
        return red, green, blue, CHANNEL_MAX

    alpha, red, green, blue = values
    return red, green, blue, alpha


def format_hex(red: int, green: int, blue: int, alpha: int = CHANNEL_MAX) -> str:
    """Uppercase hex; the alpha byte is only written for translucent colors."""
    if alpha == CHANNEL_MAX:
        return f"#{red:02X}{green:02X}{blue:02X}"
    return f"#{alpha:02X}{red:02X}{green:02X}{blue:02X}"


def _parse_number(token: str, text: str) -> float:
    token = token.strip()
    if not NUMBER_PATTERN.match(token):
        raise FormatError(f"{text!r} has a non-numeric channel {token!r}")
    return float(token)


def parse_rgba_string(text: str) -> Tuple[float, float, float, float]:
    """
    Parse ``rgb(r, g, b)`` or ``rgba(r, g, b, a)``.

    Channels are decimal numbers on the 0-255 scale. An alpha written as a
    fraction (a decimal point and a value no larger than 1, e.g. ``0.5``) is
    read as CSS opacity and scaled to 0-255. Missing alpha is opaque.

    Raises:
        FormatError: on anything else
    """
    if not isinstance(text, str):
        raise FormatError(f"{text!r} is not an rgb()/rgba() string")

    match = RGBA_PATTERN.match(text.strip())
    if match is None:
        raise FormatError(f"{text!r} is not an rgb()/rgba() string")

    tokens = match.group(1).split(",")
    if len(tokens) not in (3, 4):
        raise FormatError(f"{text!r} must have 3 or 4 channels, got {len(tokens)}")

    red, green, blue = (_parse_number(token, text) for token in tokens[:3])

    if len(tokens) == 3:
        return red, green, blue, float(CHANNEL_MAX)

    alpha = _parse_number(tokens[3], text)
    if "." in tokens[3] and 0 <= alpha <= 1:
        alpha = float(round_half_up(alpha * CHANNEL_MAX))
    return red, green, blue, alpha


def format_rgba_string(red: int, green: int, blue: int, alpha: int = CHANNEL_MAX) -> str:
    if alpha == CHANNEL_MAX:
        return f"rgb({red}, {green}, {blue})"
    return f"rgba({red}, {green}, {blue}, {alpha})"
