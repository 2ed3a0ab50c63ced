"""Color parsing, blending and WCAG luminance math."""

from .model import BLACK, WHITE, Color, is_valid_hex, normalize_hex, parse_hex
from .luminance import (
    LUMINANCE_COEFFICIENTS,
    ColorLike,
    as_color,
    contrast_from_luminance,
    contrast_ratio,
    luminance_array,
    readable_text_color,
    relative_luminance,
)

__all__ = [
    # Model
    "BLACK",
    "WHITE",
    "Color",
    "is_valid_hex",
    "normalize_hex",
    "parse_hex",
    # Luminance
    "LUMINANCE_COEFFICIENTS",
    "ColorLike",
    "as_color",
    "contrast_from_luminance",
    "contrast_ratio",
    "luminance_array",
    "readable_text_color",
    "relative_luminance",
]
