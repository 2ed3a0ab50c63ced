"""Scale rules, result containers and table construction."""

from .results import (
    GraphicsCompliance,
    ScaleResult,
    StepScales,
    TextCompliance,
    WCAGCompliance,
    make_scale_result,
)
from .rules import (
    RuleContext,
    ScaleRuleSet,
    bold_a11y_scale,
    bold_scale,
    heavy_scale,
    high_scale,
    low_scale,
    medium_alpha,
    medium_scale,
    minimal_scale,
    nearest_defined,
    surface_scale,
)
from .table import ScaleTable, ScaleTableBuilder, build_table, generate_scales_for_step

__all__ = [
    # Results
    "GraphicsCompliance",
    "ScaleResult",
    "StepScales",
    "TextCompliance",
    "WCAGCompliance",
    "make_scale_result",
    # Rules
    "RuleContext",
    "ScaleRuleSet",
    "bold_a11y_scale",
    "bold_scale",
    "heavy_scale",
    "high_scale",
    "low_scale",
    "medium_alpha",
    "medium_scale",
    "minimal_scale",
    "nearest_defined",
    "surface_scale",
    # Table
    "ScaleTable",
    "ScaleTableBuilder",
    "build_table",
    "generate_scales_for_step",
]
