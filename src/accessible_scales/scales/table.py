"""
Scale table construction.

Builds the full lookup table for a palette: every ramp step maps either to
its eight derived scales or to ``None`` when the step has no usable
surface color. The build is a pure function of its inputs; callers may
memoise it on ``(palette.cache_key(), primary_step)``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator

import pandas as pd
from loguru import logger

from ..config import ScaleConfig
from ..ramp import RAMP, Palette, RampPosition
from .results import StepScales
from .rules import ScaleRuleSet


class ScaleTable(Mapping):
    """
    Read-only mapping of every ramp step to its scales (or ``None``).

    Parameters
    ----------
    entries : Mapping[RampPosition, StepScales | None]
        One entry per ramp position.
    primary_step : RampPosition
        Primary step the table was built with.
    """

    def __init__(
        self,
        entries: Mapping[RampPosition, StepScales | None],
        primary_step: RampPosition,
    ) -> None:
        self._entries = {position: entries.get(position) for position in RAMP}
        self.primary_step = primary_step

    def __getitem__(self, position: RampPosition | int) -> StepScales | None:
        return self._entries[RampPosition.coerce(position)]

    def __iter__(self) -> Iterator[RampPosition]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        defined = len(self.defined_steps())
        return f"ScaleTable(primary_step={int(self.primary_step)}, defined={defined}/{len(self)})"

    def defined_steps(self) -> list[RampPosition]:
        """Steps with a complete scale record, in ramp order."""
        return [position for position, scales in self._entries.items() if scales is not None]

    def to_dict(self) -> dict[str, dict[str, dict[str, Any]] | None]:
        """JSON-ready dict keyed by step label."""
        return {
            position.label: None if scales is None else scales.to_dict()
            for position, scales in self._entries.items()
        }

    def to_frame(self) -> pd.DataFrame:
        """
        Long-format table with one row per (step, scale).

        Steps without a surface are omitted.

        Returns
        -------
        pd.DataFrame
            Columns: step, scale, hex, display, alpha, source_step,
            contrast_ratio, normal_text_aa, normal_text_aaa, large_text_aa,
            large_text_aaa, graphics_aa, degraded.
        """
        rows = []
        for position, scales in self._entries.items():
            if scales is None:
                continue
            for name, result in scales.items():
                rows.append(
                    {
                        "step": int(position),
                        "scale": name.value,
                        "hex": result.hex,
                        "display": result.display_value,
                        "alpha": result.alpha,
                        "source_step": int(result.source_step),
                        "contrast_ratio": result.contrast_ratio,
                        "normal_text_aa": result.wcag.normal_text.aa,
                        "normal_text_aaa": result.wcag.normal_text.aaa,
                        "large_text_aa": result.wcag.large_text.aa,
                        "large_text_aaa": result.wcag.large_text.aaa,
                        "graphics_aa": result.wcag.graphics.aa,
                        "degraded": result.degraded,
                    }
                )
        columns = [
            "step",
            "scale",
            "hex",
            "display",
            "alpha",
            "source_step",
            "contrast_ratio",
            "normal_text_aa",
            "normal_text_aaa",
            "large_text_aa",
            "large_text_aaa",
            "graphics_aa",
            "degraded",
        ]
        return pd.DataFrame(rows, columns=columns)


class ScaleTableBuilder:
    """
    Builds scale tables with a fixed configuration.

    Examples
    --------
    >>> from accessible_scales.samples import INDIGO_SAMPLE_PALETTE
    >>> table = ScaleTableBuilder().build(INDIGO_SAMPLE_PALETTE)
    >>> table[600].high.hex
    '#ffffff'
    """

    def __init__(self, config: ScaleConfig | None = None) -> None:
        self.rules = ScaleRuleSet(config)

    @property
    def config(self) -> ScaleConfig:
        return self.rules.config

    def build_step(
        self,
        surface_step: RampPosition | int,
        palette: Palette,
        primary_step: RampPosition | int | None = None,
    ) -> StepScales | None:
        """Scales for one surface step, or None if its surface is undefined or malformed."""
        position = RampPosition.coerce(surface_step)
        ctx = self.rules.context(
            position,
            palette,
            None if primary_step is None else RampPosition.coerce(primary_step),
        )
        if ctx is None:
            raw = palette.raw_value(position)
            if raw is not None:
                logger.warning(f"Skipping step {int(position)}: invalid surface color {raw!r}")
            return None
        return self.rules.evaluate(ctx)

    def build(
        self, palette: Palette, primary_step: RampPosition | int | None = None
    ) -> ScaleTable:
        """
        Build the full table for ``palette``.

        Parameters
        ----------
        palette : Palette
            Ramp of base colors.
        primary_step : RampPosition | int, optional
            Anchor for Bold and BoldA11Y. Defaults to ``palette.primary_step``.

        Returns
        -------
        ScaleTable
        """
        primary = RampPosition.coerce(
            palette.primary_step if primary_step is None else primary_step
        )
        entries = {position: self.build_step(position, palette, primary) for position in RAMP}
        table = ScaleTable(entries, primary)
        logger.info(
            f"Built scale table for {palette.name or 'palette'}: "
            f"{len(table.defined_steps())}/{len(RAMP)} steps defined, primary {int(primary)}"
        )
        return table


def generate_scales_for_step(
    surface_step: RampPosition | int,
    palette: Palette,
    primary_step: RampPosition | int | None = None,
    config: ScaleConfig | None = None,
) -> StepScales | None:
    """Eight scales for a single surface step."""
    return ScaleTableBuilder(config).build_step(surface_step, palette, primary_step)


def build_table(
    palette: Palette,
    primary_step: RampPosition | int | None = None,
    config: ScaleConfig | None = None,
) -> ScaleTable:
    """Build the scale table for every step of ``palette``."""
    return ScaleTableBuilder(config).build(palette, primary_step)
