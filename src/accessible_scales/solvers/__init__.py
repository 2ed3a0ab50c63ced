"""Search primitives used by the scale rules.

This module provides the alpha solver (opacity for a target contrast) and
the step walker (ordered ramp search for a contrast threshold).
"""

from .alpha import AlphaSolution, AlphaSolver, find_alpha_for_contrast
from .steps import StepWalker, WalkHit, walk_for_contrast

__all__ = [
    # Alpha
    "AlphaSolution",
    "AlphaSolver",
    "find_alpha_for_contrast",
    # Steps
    "StepWalker",
    "WalkHit",
    "walk_for_contrast",
]
