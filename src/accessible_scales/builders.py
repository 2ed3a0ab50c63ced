"""
Fluent builder for palettes.

Examples
--------
>>> palette = (PaletteBuilder()
...     .with_name("Brand")
...     .with_step(200, "#0b0034")
...     .with_step(2500, "#ffffff")
...     .with_primary(600)
...     .build())
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .color.model import Color, is_valid_hex
from .exceptions import PaletteValidationError
from .ramp import DEFAULT_PRIMARY_STEP, Palette, RampPosition

if TYPE_CHECKING:
    from typing import Self


class PaletteBuilder:
    """
    Builder for Palette objects.

    Unlike constructing :class:`Palette` directly, ``build()`` can be asked
    to reject malformed colors up front with ``strict=True``.
    """

    def __init__(self) -> None:
        self._steps: dict[int | RampPosition, str | None] = {}
        self._primary: int | RampPosition = DEFAULT_PRIMARY_STEP
        self._name: str | None = None

    def with_name(self, name: str) -> Self:
        self._name = name
        return self

    def with_step(self, step: int | RampPosition, color: str | Color | None) -> Self:
        """Set the color at one step (``None`` clears it)."""
        self._steps[step] = color.to_hex() if isinstance(color, Color) else color
        return self

    def with_steps(self, steps: Mapping[int | RampPosition, str | Color | None]) -> Self:
        for step, color in steps.items():
            self.with_step(step, color)
        return self

    def with_primary(self, step: int | RampPosition) -> Self:
        """Set the primary (anchor) step used by Bold and BoldA11Y."""
        self._primary = step
        return self

    def build(self, strict: bool = False) -> Palette:
        """
        Build the Palette.

        Parameters
        ----------
        strict : bool, default=False
            Also reject steps whose color is not a valid ``#rrggbb`` string.

        Raises
        ------
        PaletteValidationError
            On unknown steps, an unknown primary step, or (with ``strict``)
            malformed colors.
        """
        if strict:
            invalid = [
                str(step)
                for step, color in self._steps.items()
                if color and not is_valid_hex(color)
            ]
            if invalid:
                raise PaletteValidationError(
                    f"Invalid colors at steps: {', '.join(invalid)}"
                )
        try:
            return Palette(steps=self._steps, primary_step=self._primary, name=self._name)
        except ValidationError as exc:
            raise PaletteValidationError(str(exc)) from exc
