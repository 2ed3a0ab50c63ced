"""
Result containers for scale generation.

Serialised forms use camelCase keys (``normalText``, ``contrastRatio``,
``boldA11Y``) so renderers and token exporters can consume them directly.
"""

from __future__ import annotations

from typing import Any, Iterator

from pydantic import BaseModel, Field

from ..color.luminance import contrast_ratio
from ..color.model import Color
from ..config import DEFAULT_CONFIG, ScaleName, WCAGThresholds
from ..ramp import RampPosition


# =============================================================================
# WCAG classification
# =============================================================================


class TextCompliance(BaseModel):
    aa: bool
    aaa: bool

    model_config = {"frozen": True}


class GraphicsCompliance(BaseModel):
    aa: bool

    model_config = {"frozen": True}


class WCAGCompliance(BaseModel):
    """Pass/fail of a contrast ratio against each WCAG 2.1 criterion.

    - Normal text: AA >= 4.5, AAA >= 7.0
    - Large text: AA >= 3.0, AAA >= 4.5
    - Graphics / UI components: AA >= 3.0
    """

    normal_text: TextCompliance = Field(alias="normalText")
    large_text: TextCompliance = Field(alias="largeText")
    graphics: GraphicsCompliance

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_ratio(
        cls, ratio: float, thresholds: WCAGThresholds | None = None
    ) -> WCAGCompliance:
        t = thresholds or DEFAULT_CONFIG.wcag
        return cls(
            normal_text=TextCompliance(
                aa=ratio >= t.normal_text_aa, aaa=ratio >= t.normal_text_aaa
            ),
            large_text=TextCompliance(
                aa=ratio >= t.large_text_aa, aaa=ratio >= t.large_text_aaa
            ),
            graphics=GraphicsCompliance(aa=ratio >= t.graphics_aa),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


# =============================================================================
# Scale results
# =============================================================================


class ScaleResult(BaseModel):
    """
    One derived color for one surface.

    Attributes
    ----------
    color : Color
        Display color. Carries an alpha when the rule blends a contrasting
        color over the surface.
    blended : Color
        Opaque color actually seen on the surface; contrast is measured on it.
    source_step : RampPosition
        Ramp step that supplied the base color.
    contrast_ratio : float
        Contrast of ``blended`` against the surface.
    wcag : WCAGCompliance
        Classification of ``contrast_ratio``.
    degraded : bool
        True when the rule could not meet its target and returned the best
        available color instead.
    """

    color: Color
    blended: Color
    source_step: RampPosition
    contrast_ratio: float = Field(..., ge=1.0)
    wcag: WCAGCompliance
    degraded: bool = False

    model_config = {"frozen": True}

    @property
    def alpha(self) -> float | None:
        return self.color.alpha

    @property
    def uses_alpha(self) -> bool:
        return self.color.alpha is not None

    @property
    def hex(self) -> str:
        """Base color hex, without alpha."""
        return self.color.to_hex()

    @property
    def blended_hex(self) -> str:
        return self.blended.to_hex()

    @property
    def display_value(self) -> str:
        """``#rrggbb`` for opaque results, CSS ``rgba()`` for blended ones."""
        return str(self.color)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "hex": self.display_value,
            "blendedHex": self.blended_hex,
            "alpha": self.alpha,
            "contrastRatio": self.contrast_ratio,
            "wcag": self.wcag.to_dict(),
            "sourceStep": int(self.source_step),
            "degraded": self.degraded,
        }


def make_scale_result(
    color: Color,
    surface: Color,
    source_step: RampPosition,
    alpha: float | None = None,
    degraded: bool = False,
    thresholds: WCAGThresholds | None = None,
) -> ScaleResult:
    """
    Build a ScaleResult, measuring contrast on the color as seen on ``surface``.

    Parameters
    ----------
    color : Color
        Base color of the result.
    surface : Color
        Surface the result sits on.
    source_step : RampPosition
        Step that supplied ``color``.
    alpha : float, optional
        Opacity to composite ``color`` at. ``None`` uses it opaque.
    degraded : bool, default=False
        Marks a best-effort result.
    thresholds : WCAGThresholds, optional
        WCAG cut-offs; defaults to the WCAG 2.1 values.
    """
    base = color.opaque()
    blended = base if alpha is None else base.blend_over(surface, alpha)
    ratio = contrast_ratio(blended, surface)
    return ScaleResult(
        color=base.with_alpha(alpha),
        blended=blended,
        source_step=source_step,
        contrast_ratio=ratio,
        wcag=WCAGCompliance.from_ratio(ratio, thresholds),
        degraded=degraded,
    )


_FIELD_BY_NAME = {
    ScaleName.SURFACE: "surface",
    ScaleName.HIGH: "high",
    ScaleName.MEDIUM: "medium",
    ScaleName.LOW: "low",
    ScaleName.HEAVY: "heavy",
    ScaleName.BOLD: "bold",
    ScaleName.BOLD_A11Y: "bold_a11y",
    ScaleName.MINIMAL: "minimal",
}


class StepScales(BaseModel):
    """The eight derived scales for one surface step."""

    surface: ScaleResult
    high: ScaleResult
    medium: ScaleResult
    low: ScaleResult
    heavy: ScaleResult
    bold: ScaleResult
    bold_a11y: ScaleResult = Field(alias="boldA11Y")
    minimal: ScaleResult

    model_config = {"frozen": True, "populate_by_name": True}

    def __getitem__(self, name: ScaleName | str) -> ScaleResult:
        return getattr(self, _FIELD_BY_NAME[ScaleName(name)])

    def items(self) -> Iterator[tuple[ScaleName, ScaleResult]]:
        for name in ScaleName:
            yield name, self[name]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name.value: result.to_dict() for name, result in self.items()}
