"""Exceptions raised by huekit."""


class ColorError(ValueError):
    """Base class for every input error raised while building a color."""


class FormatError(ColorError):
    """A hex string, rgb()/rgba() string or channel array is malformed."""


class UnknownColorNameError(ColorError):
    """A named-color lookup found no match."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown color name: {name!r}")
