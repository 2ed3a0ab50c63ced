"""
Ramp positions and palettes.

A ramp is a closed, ordered set of steps labelled 200 through 2500 in
increments of 100. Step 200 is the dark extreme and step 2500 the light
extreme. Rules depend on index arithmetic between neighbouring steps, so
positions are modelled as an ``IntEnum`` rather than free integers.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, field_serializer, field_validator

from .color.model import Color
from .exceptions import ColorParseError


class RampPosition(IntEnum):
    """One of the fixed, totally ordered ramp steps (dark to light)."""

    STEP_200 = 200
    STEP_300 = 300
    STEP_400 = 400
    STEP_500 = 500
    STEP_600 = 600
    STEP_700 = 700
    STEP_800 = 800
    STEP_900 = 900
    STEP_1000 = 1000
    STEP_1100 = 1100
    STEP_1200 = 1200
    STEP_1300 = 1300
    STEP_1400 = 1400
    STEP_1500 = 1500
    STEP_1600 = 1600
    STEP_1700 = 1700
    STEP_1800 = 1800
    STEP_1900 = 1900
    STEP_2000 = 2000
    STEP_2100 = 2100
    STEP_2200 = 2200
    STEP_2300 = 2300
    STEP_2400 = 2400
    STEP_2500 = 2500

    @property
    def index(self) -> int:
        """Zero-based index of this step in ramp order."""
        return RAMP.index(self)

    @property
    def label(self) -> str:
        return str(self.value)

    @classmethod
    def from_index(cls, index: int) -> RampPosition:
        """Step at ``index``. Raises IndexError outside the ramp."""
        if not 0 <= index < len(RAMP):
            raise IndexError(f"Ramp index out of range: {index}")
        return RAMP[index]

    @classmethod
    def darkest(cls) -> RampPosition:
        return RAMP[0]

    @classmethod
    def lightest(cls) -> RampPosition:
        return RAMP[-1]

    @classmethod
    def coerce(cls, value: Any) -> RampPosition:
        """Accept a RampPosition, its integer label, or the label as a string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Unknown ramp position: {value!r}")
        try:
            return cls(int(value))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Unknown ramp position: {value!r}") from exc

    def offset(self, n: int) -> RampPosition:
        """Step ``n`` positions away, clamped to the ramp bounds."""
        return RAMP[max(0, min(len(RAMP) - 1, self.index + n))]

    def distance(self, other: RampPosition) -> int:
        """Number of ramp positions between this step and ``other``."""
        return abs(self.index - RampPosition.coerce(other).index)


RAMP: tuple[RampPosition, ...] = tuple(RampPosition)

DEFAULT_PRIMARY_STEP = RampPosition.STEP_600


def _empty_steps() -> dict[RampPosition, str | None]:
    return {position: None for position in RAMP}


class Palette(BaseModel):
    """
    A ramp of optional base colors plus the primary (anchor) step.

    Every ramp position is present in ``steps``. Undefined positions hold
    ``None``; empty strings are treated as undefined. Malformed color
    strings are kept as given and resolve to ``None`` through
    :meth:`color_at`, so a single bad entry never invalidates the palette.

    Palettes are immutable and hashable: ``steps`` is a read-only mapping,
    and the ``with_*`` methods return copies.

    Examples
    --------
    >>> palette = Palette(steps={200: "#0b0034", 2500: "#ffffff"})
    >>> palette.color_at(RampPosition.STEP_200).to_hex()
    '#0b0034'
    >>> palette.color_at(RampPosition.STEP_600) is None
    True
    """

    steps: Mapping[RampPosition, str | None] = Field(
        default_factory=_empty_steps, validate_default=True
    )
    primary_step: RampPosition = DEFAULT_PRIMARY_STEP
    name: str | None = None

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("steps", mode="before")
    @classmethod
    def _complete_steps(cls, value: Any) -> dict[RampPosition, str | None]:
        if value is None:
            return _empty_steps()
        if not isinstance(value, Mapping):
            raise ValueError("steps must be a mapping of ramp position to color")
        steps = _empty_steps()
        for key, hex_value in value.items():
            steps[RampPosition.coerce(key)] = hex_value or None
        return steps

    @field_validator("steps", mode="after")
    @classmethod
    def _freeze_steps(
        cls, value: Mapping[RampPosition, str | None]
    ) -> Mapping[RampPosition, str | None]:
        return MappingProxyType({position: value[position] for position in RAMP})

    @field_serializer("steps")
    def _serialize_steps(
        self, steps: Mapping[RampPosition, str | None]
    ) -> dict[int, str | None]:
        return {int(position): value for position, value in steps.items()}

    @field_validator("primary_step", mode="before")
    @classmethod
    def _coerce_primary(cls, value: Any) -> RampPosition:
        return RampPosition.coerce(value)

    def raw_value(self, position: RampPosition) -> str | None:
        return self.steps.get(RampPosition.coerce(position))

    def color_at(self, position: RampPosition) -> Color | None:
        """Parsed color at ``position``, or None if undefined or malformed."""
        raw = self.raw_value(position)
        if raw is None:
            return None
        try:
            return Color.from_hex(raw)
        except ColorParseError:
            logger.debug(f"Ignoring malformed color {raw!r} at step {int(position)}")
            return None

    def is_defined(self, position: RampPosition) -> bool:
        return self.color_at(position) is not None

    def defined_positions(self) -> list[RampPosition]:
        """Positions holding a valid color, in ramp order."""
        return [position for position in RAMP if self.is_defined(position)]

    def with_step(self, position: RampPosition | int, value: str | Color | None) -> Palette:
        """Copy of this palette with one step replaced."""
        if isinstance(value, Color):
            value = value.to_hex()
        steps = dict(self.steps)
        steps[RampPosition.coerce(position)] = value or None
        return type(self)(steps=steps, primary_step=self.primary_step, name=self.name)

    def with_primary(self, step: RampPosition | int) -> Palette:
        return self.model_copy(update={"primary_step": RampPosition.coerce(step)})

    def cache_key(self) -> tuple[tuple[str | None, ...], int]:
        """Hashable key over palette content, for external memoisation."""
        return (tuple(self.steps[p] for p in RAMP), int(self.primary_step))

    def __hash__(self) -> int:
        return hash((self.cache_key(), self.name))


def create_default_palette(name: str | None = None) -> Palette:
    """A palette with every step undefined and the primary at step 600."""
    return Palette(name=name)
