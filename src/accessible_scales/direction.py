"""
Contrast direction resolution.

Every surface has a natural contrasting color that lies toward one end of
the ramp. The convention is fixed and shared by all scale rules:

- ``TOWARD_DARK``: contrasting extreme is step 200, synthetic fallback black.
- ``TOWARD_LIGHT``: contrasting extreme is step 2500, synthetic fallback white.
"""

from __future__ import annotations

from enum import Enum

from .color.luminance import ColorLike, as_color, contrast_ratio
from .color.model import BLACK, WHITE, Color
from .ramp import RampPosition


class Direction(str, Enum):
    """Side of the ramp holding a surface's contrasting color."""

    TOWARD_DARK = "dark"
    TOWARD_LIGHT = "light"

    @property
    def extreme(self) -> RampPosition:
        """Ramp end that plays the contrasting-color role."""
        if self is Direction.TOWARD_DARK:
            return RampPosition.darkest()
        return RampPosition.lightest()

    @property
    def fallback_color(self) -> Color:
        """Pure black or white, used when the extreme is undefined."""
        return BLACK if self is Direction.TOWARD_DARK else WHITE

    @property
    def step_delta(self) -> int:
        """Ramp index increment that moves toward the extreme."""
        return -1 if self is Direction.TOWARD_DARK else 1


def resolve_direction(surface: ColorLike) -> Direction:
    """
    Pick the direction whose synthetic extreme contrasts more with ``surface``.

    Ties resolve toward dark.

    Examples
    --------
    >>> resolve_direction("#ffffff")
    <Direction.TOWARD_DARK: 'dark'>
    >>> resolve_direction("#000000")
    <Direction.TOWARD_LIGHT: 'light'>
    """
    color = as_color(surface)
    if contrast_ratio(color, BLACK) >= contrast_ratio(color, WHITE):
        return Direction.TOWARD_DARK
    return Direction.TOWARD_LIGHT
