"""Ordered search along the ramp for a step meeting a contrast threshold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from ..color.luminance import ColorLike, as_color, contrast_ratio
from ..color.model import Color
from ..direction import Direction
from ..ramp import RAMP, Palette, RampPosition


@dataclass(frozen=True)
class WalkHit:
    """A ramp step that satisfied the walk's threshold."""

    position: RampPosition
    color: Color
    contrast_ratio: float


class StepWalker:
    """
    Walks a palette from a start step toward one ramp extreme.

    Undefined or malformed steps are skipped. Reaching the end of the ramp
    without a match is reported as ``None``; callers apply their own
    fallback.

    Parameters
    ----------
    palette : Palette
        Palette to read colors from.
    surface : Color | str
        Surface the contrast is measured against.
    """

    def __init__(self, palette: Palette, surface: ColorLike) -> None:
        self.palette = palette
        self.surface = as_color(surface)

    def positions(self, start: RampPosition, direction: Direction) -> Iterator[RampPosition]:
        """Steps from ``start`` (inclusive) to the direction's extreme."""
        index = RampPosition.coerce(start).index
        while 0 <= index < len(RAMP):
            yield RAMP[index]
            index += direction.step_delta

    def walk(
        self, start: RampPosition, direction: Direction, threshold: float
    ) -> WalkHit | None:
        """First defined step whose contrast with the surface is >= ``threshold``."""
        for position in self.positions(start, direction):
            color = self.palette.color_at(position)
            if color is None:
                continue
            ratio = contrast_ratio(color, self.surface)
            if ratio >= threshold:
                return WalkHit(position=position, color=color, contrast_ratio=ratio)
        return None


def walk_for_contrast(
    palette: Palette,
    surface: ColorLike,
    start: RampPosition,
    direction: Direction,
    threshold: float,
) -> WalkHit | None:
    """Functional form of :meth:`StepWalker.walk`."""
    return StepWalker(palette, surface).walk(start, direction, threshold)
