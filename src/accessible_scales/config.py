"""
Configuration classes for accessible scale generation.

The defaults are the business constants of the scale rules. Uses Pydantic
for validation and immutability.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .ramp import RampPosition


# =============================================================================
# Enums
# =============================================================================


class AlphaMode(str, Enum):
    """How the alpha solver treats its contrast target."""

    AT_LEAST = "at_least"  # smallest alpha meeting the target, never below
    NEAREST = "nearest"  # alpha whose contrast is closest to the target


class ScaleName(str, Enum):
    """The eight derived scales, in record order."""

    SURFACE = "surface"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    HEAVY = "heavy"
    BOLD = "bold"
    BOLD_A11Y = "boldA11Y"
    MINIMAL = "minimal"


# =============================================================================
# WCAG thresholds
# =============================================================================


class WCAGThresholds(BaseModel):
    """Minimum contrast ratios for each WCAG 2.1 criterion."""

    normal_text_aa: float = Field(default=4.5, ge=1.0, le=21.0)
    normal_text_aaa: float = Field(default=7.0, ge=1.0, le=21.0)
    large_text_aa: float = Field(default=3.0, ge=1.0, le=21.0)
    large_text_aaa: float = Field(default=4.5, ge=1.0, le=21.0)
    graphics_aa: float = Field(default=3.0, ge=1.0, le=21.0)

    model_config = {"extra": "forbid", "frozen": True}


# =============================================================================
# Scale configuration
# =============================================================================


class ScaleConfig(BaseModel):
    """Constants driving the scale rules and the alpha solver."""

    low_target: float = Field(
        default=4.5, ge=1.0, le=21.0, description="Contrast Low aims for exactly"
    )
    bold_threshold: float = Field(default=3.0, ge=1.0, le=21.0)
    bold_a11y_threshold: float = Field(default=4.5, ge=1.0, le=21.0)

    alpha_tolerance: float = Field(
        default=0.001, gt=0.0, lt=1.0, description="Width of the final alpha bracket"
    )
    max_iterations: int = Field(default=50, ge=1, le=1000)

    heavy_cap_step: RampPosition = Field(
        default=RampPosition.STEP_800,
        description="Lightest step Heavy may resolve to on light surfaces",
    )
    heavy_max_distance: int = Field(
        default=3,
        ge=0,
        description="Max positions BoldA11Y may sit from the surface before Heavy uses the light extreme",
    )
    minimal_offset: int = Field(default=2, ge=0)
    minimal_pivot_step: RampPosition = Field(
        default=RampPosition.STEP_1200,
        description="Surfaces at or above this step move Minimal toward the dark end",
    )

    wcag: WCAGThresholds = Field(default_factory=WCAGThresholds)

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("heavy_cap_step", "minimal_pivot_step", mode="before")
    @classmethod
    def _coerce_step(cls, value: Any) -> RampPosition:
        return RampPosition.coerce(value)

    @model_validator(mode="after")
    def _check_thresholds(self) -> ScaleConfig:
        if self.bold_a11y_threshold < self.bold_threshold:
            raise ValueError("bold_a11y_threshold must be >= bold_threshold")
        return self

    @classmethod
    def default(cls) -> ScaleConfig:
        return DEFAULT_CONFIG


DEFAULT_CONFIG = ScaleConfig()
