"""
Color model for accessible scale generation.

Colors are simplified sRGB values with three 8-bit channels and an
optional opacity. Parsing only accepts six hex digits, optionally
prefixed with ``#``.
"""

from __future__ import annotations

import re

import numpy as np
from pydantic import BaseModel, Field

from ..exceptions import ColorParseError

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


class Color(BaseModel):
    """An 8-bit-per-channel RGB color with optional alpha.

    Attributes
    ----------
    red, green, blue : int
        Channel values in [0, 255].
    alpha : float | None
        Opacity in [0, 1]. ``None`` means the color is used as-is
        (fully opaque).
    """

    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)
    alpha: float | None = Field(default=None, ge=0.0, le=1.0)

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse a ``#rrggbb`` (or ``rrggbb``) string.

        Raises
        ------
        ColorParseError
            If the value is not a string of exactly six hex digits.
        """
        if not isinstance(value, str):
            raise ColorParseError(value)
        match = _HEX_PATTERN.match(value.strip())
        if match is None:
            raise ColorParseError(value)
        digits = match.group(1)
        return cls(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
        )

    @property
    def channels(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Render as lowercase ``#rrggbb``, ignoring alpha."""
        return "#{:02x}{:02x}{:02x}".format(*self.channels)

    def to_rgba_string(self) -> str:
        """Render as a CSS ``rgb()``/``rgba()`` string."""
        if self.alpha is None:
            return "rgb({}, {}, {})".format(*self.channels)
        return "rgba({}, {}, {}, {:g})".format(*self.channels, round(self.alpha, 3))

    def with_alpha(self, alpha: float | None) -> Color:
        return self.model_copy(update={"alpha": alpha})

    def opaque(self) -> Color:
        return self.with_alpha(None)

    def blend_over(self, background: Color, alpha: float | None = None) -> Color:
        """
        Composite this color over an opaque background.

        Uses standard source-over compositing in sRGB:
            out = alpha * fg + (1 - alpha) * bg

        with each channel rounded half-up to the nearest 8-bit value.

        Parameters
        ----------
        background : Color
            Backdrop; its own alpha is ignored.
        alpha : float, optional
            Opacity to composite with. Defaults to this color's alpha,
            or 1.0 when it has none.

        Returns
        -------
        Color
            The resulting opaque color.
        """
        if alpha is None:
            alpha = 1.0 if self.alpha is None else self.alpha
        alpha = min(1.0, max(0.0, float(alpha)))

        fg = np.asarray(self.channels, dtype=float)
        bg = np.asarray(background.channels, dtype=float)
        mixed = np.floor(alpha * fg + (1.0 - alpha) * bg + 0.5)
        red, green, blue = (int(c) for c in np.clip(mixed, 0, 255))
        return Color(red=red, green=green, blue=blue)

    def __str__(self) -> str:
        return self.to_hex() if self.alpha is None else self.to_rgba_string()


BLACK = Color(red=0, green=0, blue=0)
WHITE = Color(red=255, green=255, blue=255)


def parse_hex(value: str) -> Color:
    """Functional alias for :meth:`Color.from_hex`."""
    return Color.from_hex(value)


def is_valid_hex(value: object) -> bool:
    """Return True if ``value`` parses to exactly three 8-bit channels."""
    return isinstance(value, str) and _HEX_PATTERN.match(value.strip()) is not None


def normalize_hex(value: str) -> str:
    """Return canonical lowercase ``#rrggbb``; invalid input is returned unchanged."""
    if not is_valid_hex(value):
        return value
    return Color.from_hex(value).to_hex()
