"""WCAG relative luminance and contrast ratio.

Implements the WCAG 2.x formulas on 8-bit sRGB channels:

- each channel is scaled to [0, 1] and linearised, using ``c / 12.92``
  at or below 0.03928 and ``((c + 0.055) / 1.055) ** 2.4`` above it;
- luminance is the weighted sum with coefficients 0.2126, 0.7152, 0.0722;
- contrast is ``(L_lighter + 0.05) / (L_darker + 0.05)``.

Inputs are assumed to be valid colors; hex strings are parsed on the way
in and raise :class:`~accessible_scales.exceptions.ColorParseError` if
malformed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Union

import numpy as np

from .model import BLACK, WHITE, Color

if TYPE_CHECKING:
    from numpy.typing import NDArray

ColorLike = Union[Color, str]

LUMINANCE_COEFFICIENTS = np.array([0.2126, 0.7152, 0.0722])
LINEAR_THRESHOLD = 0.03928


def as_color(color: ColorLike) -> Color:
    return color if isinstance(color, Color) else Color.from_hex(color)


def _linearize(channels: NDArray) -> NDArray:
    c = np.asarray(channels, dtype=float) / 255.0
    return np.where(c <= LINEAR_THRESHOLD, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def relative_luminance(color: ColorLike) -> float:
    """Relative luminance of a color in [0, 1]."""
    return float(_linearize(as_color(color).channels) @ LUMINANCE_COEFFICIENTS)


def luminance_array(colors: Iterable[ColorLike]) -> NDArray[np.floating]:
    """
    Relative luminance of many colors in one vectorised pass.

    Parameters
    ----------
    colors : Iterable[Color | str]
        Colors to evaluate.

    Returns
    -------
    NDArray[np.floating]
        Array of shape (n_colors,).
    """
    channels = np.array([as_color(c).channels for c in colors], dtype=float)
    if channels.size == 0:
        return np.zeros(0)
    return _linearize(channels) @ LUMINANCE_COEFFICIENTS


def contrast_from_luminance(l1: float, l2: float) -> float:
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """WCAG contrast ratio between two colors. Symmetric, always >= 1."""
    return contrast_from_luminance(
        relative_luminance(color1), relative_luminance(color2)
    )


def readable_text_color(background: ColorLike) -> Color:
    """Black or white, whichever contrasts more with ``background``."""
    bg = as_color(background)
    if contrast_ratio(BLACK, bg) >= contrast_ratio(WHITE, bg):
        return BLACK
    return WHITE
