"""
Accessible Scales

Derives WCAG-driven color scales from a palette ramp. For every surface
step the engine resolves eight dependent colors (Surface, High, Medium,
Low, Heavy, Bold, BoldA11Y, Minimal), each solving a contrast constraint
against that surface, and assembles them into a table for the whole ramp.
"""

from .builders import PaletteBuilder
from .color import (
    BLACK,
    WHITE,
    Color,
    contrast_ratio,
    is_valid_hex,
    luminance_array,
    normalize_hex,
    parse_hex,
    readable_text_color,
    relative_luminance,
)
from .config import (
    DEFAULT_CONFIG,
    # Enums
    AlphaMode,
    ScaleName,
    # Config classes
    ScaleConfig,
    WCAGThresholds,
)
from .direction import Direction, resolve_direction
from .exceptions import AccessibleScalesError, ColorParseError, PaletteValidationError
from .ramp import RAMP, Palette, RampPosition, create_default_palette
from .samples import INDIGO_SAMPLE_PALETTE
from .scales import (
    ScaleResult,
    ScaleRuleSet,
    ScaleTable,
    ScaleTableBuilder,
    StepScales,
    WCAGCompliance,
    build_table,
    generate_scales_for_step,
)
from .solvers import (
    AlphaSolution,
    AlphaSolver,
    StepWalker,
    WalkHit,
    find_alpha_for_contrast,
    walk_for_contrast,
)

__version__ = "0.1.0"

__all__ = [
    # Color
    "BLACK",
    "WHITE",
    "Color",
    "contrast_ratio",
    "is_valid_hex",
    "luminance_array",
    "normalize_hex",
    "parse_hex",
    "readable_text_color",
    "relative_luminance",
    # Config
    "DEFAULT_CONFIG",
    "AlphaMode",
    "ScaleName",
    "ScaleConfig",
    "WCAGThresholds",
    # Direction
    "Direction",
    "resolve_direction",
    # Errors
    "AccessibleScalesError",
    "ColorParseError",
    "PaletteValidationError",
    # Ramp
    "RAMP",
    "Palette",
    "RampPosition",
    "create_default_palette",
    "PaletteBuilder",
    "INDIGO_SAMPLE_PALETTE",
    # Solvers
    "AlphaSolution",
    "AlphaSolver",
    "StepWalker",
    "WalkHit",
    "find_alpha_for_contrast",
    "walk_for_contrast",
    # Scales
    "ScaleResult",
    "ScaleRuleSet",
    "ScaleTable",
    "ScaleTableBuilder",
    "StepScales",
    "WCAGCompliance",
    "build_table",
    "generate_scales_for_step",
]
