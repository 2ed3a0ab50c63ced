"""Exception types raised by the accessible scales package."""

from __future__ import annotations


class AccessibleScalesError(Exception):
    """Base class for errors raised by accessible_scales."""

    pass


class ColorParseError(AccessibleScalesError, ValueError):
    """Raised when a string does not parse to exactly three 8-bit channels."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Color must be a #RRGGBB hex string: {value!r}")


class PaletteValidationError(AccessibleScalesError, ValueError):
    """Raised when a palette refers to unknown ramp positions."""

    pass
