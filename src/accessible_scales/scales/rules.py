"""
The eight scale rules.

Each rule derives one color for a surface step:

- Surface: the surface itself.
- High: the contrasting extreme at full opacity.
- Low: the contrasting extreme blended to exactly the Low target (4.5:1),
  or a real palette step when no blend can get there.
- Medium: the contrasting extreme at the alpha midway between Low and 1.
- Bold / BoldA11Y: first step from the primary step toward the extreme
  reaching 3.0:1 / 4.5:1, else the pure black/white blended to the threshold.
- Heavy: between Bold and the dark extreme on light surfaces, BoldA11Y
  (or the light extreme) on dark surfaces.
- Minimal: two steps from the surface, toward the middle of the ramp.

Low must run before Medium, and Bold/BoldA11Y before Heavy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from ..color.luminance import contrast_ratio
from ..color.model import Color
from ..config import DEFAULT_CONFIG, AlphaMode, ScaleConfig
from ..direction import Direction, resolve_direction
from ..ramp import RAMP, Palette, RampPosition
from ..solvers.alpha import AlphaSolver
from ..solvers.steps import StepWalker
from .results import ScaleResult, StepScales, make_scale_result


@dataclass(frozen=True)
class RuleContext:
    """
    Inputs shared by every rule for one surface step.

    ``palette`` is the effective palette: when the contrasting extreme is
    undefined it holds pure black or white there instead.
    """

    surface_step: RampPosition
    surface: Color
    palette: Palette
    direction: Direction
    primary_step: RampPosition
    config: ScaleConfig

    @classmethod
    def for_step(
        cls,
        surface_step: RampPosition,
        palette: Palette,
        primary_step: RampPosition | None = None,
        config: ScaleConfig | None = None,
    ) -> RuleContext | None:
        """Context for ``surface_step``, or None if its surface is unusable."""
        surface = palette.color_at(surface_step)
        if surface is None:
            return None

        direction = resolve_direction(surface)
        effective = palette
        if palette.color_at(direction.extreme) is None:
            effective = palette.with_step(direction.extreme, direction.fallback_color)

        return cls(
            surface_step=RampPosition.coerce(surface_step),
            surface=surface,
            palette=effective,
            direction=direction,
            primary_step=RampPosition.coerce(
                palette.primary_step if primary_step is None else primary_step
            ),
            config=config or DEFAULT_CONFIG,
        )

    @property
    def contrasting_step(self) -> RampPosition:
        return self.direction.extreme

    @property
    def contrasting_color(self) -> Color:
        return self.palette.color_at(self.direction.extreme)

    def result(
        self,
        color: Color,
        source_step: RampPosition,
        alpha: float | None = None,
        degraded: bool = False,
    ) -> ScaleResult:
        return make_scale_result(
            color,
            self.surface,
            source_step,
            alpha=alpha,
            degraded=degraded,
            thresholds=self.config.wcag,
        )

    def result_at(self, position: RampPosition) -> ScaleResult:
        """Opaque result for ``position``, or its nearest defined neighbour."""
        source = nearest_defined(self.palette, position, self.direction)
        return self.result(self.palette.color_at(source), source)


def nearest_defined(
    palette: Palette, position: RampPosition, direction: Direction
) -> RampPosition:
    """
    Closest defined step to ``position``.

    Equal distances prefer the step toward ``direction``'s extreme.
    Returns ``position`` unchanged if nothing in the palette is defined.
    """
    index = position.index
    for distance in range(len(RAMP)):
        for candidate in (
            index + distance * direction.step_delta,
            index - distance * direction.step_delta,
        ):
            if 0 <= candidate < len(RAMP) and palette.is_defined(RAMP[candidate]):
                return RAMP[candidate]
    return position


# =============================================================================
# Rules
# =============================================================================


def surface_scale(ctx: RuleContext) -> ScaleResult:
    return ctx.result(ctx.surface, ctx.surface_step)


def high_scale(ctx: RuleContext) -> ScaleResult:
    """Contrasting extreme at full opacity."""
    return ctx.result(ctx.contrasting_color, ctx.contrasting_step)


def low_scale(ctx: RuleContext, solver: AlphaSolver) -> ScaleResult:
    """
    Contrasting extreme blended to hit the Low target as closely as possible.

    When the extreme cannot reach the target even at full opacity, every
    defined step is searched in ramp order and the first one meeting the
    target is used opaque. If none does, the highest-contrast step is
    returned opaque and flagged as degraded.
    """
    target = ctx.config.low_target
    cc = ctx.contrasting_color
    full_contrast = contrast_ratio(cc, ctx.surface)

    if full_contrast < target:
        return _low_escape(ctx, full_contrast)

    solution = solver.solve(cc, ctx.surface, target, AlphaMode.NEAREST)
    return ctx.result(cc, ctx.contrasting_step, alpha=solution.alpha)


def _low_escape(ctx: RuleContext, full_contrast: float) -> ScaleResult:
    target = ctx.config.low_target
    best_step = ctx.contrasting_step
    best_contrast = full_contrast

    for position in ctx.palette.defined_positions():
        ratio = contrast_ratio(ctx.palette.color_at(position), ctx.surface)
        if ratio >= target:
            return ctx.result(ctx.palette.color_at(position), position)
        if ratio > best_contrast:
            best_step, best_contrast = position, ratio

    logger.debug(
        f"Low for step {int(ctx.surface_step)}: no step reaches {target}:1, "
        f"best is {int(best_step)} at {best_contrast:.2f}:1"
    )
    return ctx.result(ctx.palette.color_at(best_step), best_step, degraded=True)


def medium_alpha(low_alpha: float | None) -> float:
    """
    Alpha halfway between full opacity and Low's alpha, floored to 1%.

    Low without alpha counts as 1.0. The result is never below Low's alpha.
    """
    low = 1.0 if low_alpha is None else low_alpha
    # absorb float error so 0.58 floors to 0.79, not 0.78
    alpha = math.floor(round((1.0 + low) / 2 * 100, 9)) / 100
    return max(alpha, low)


def medium_scale(ctx: RuleContext, low: ScaleResult) -> ScaleResult:
    alpha = medium_alpha(low.alpha)
    return ctx.result(ctx.contrasting_color, ctx.contrasting_step, alpha=alpha)


def _anchored_scale(
    ctx: RuleContext, solver: AlphaSolver, threshold: float, name: str
) -> ScaleResult:
    hit = StepWalker(ctx.palette, ctx.surface).walk(
        ctx.primary_step, ctx.direction, threshold
    )
    # the walk ends at the extreme, which the effective palette always defines
    if hit is not None:
        return ctx.result(hit.color, hit.position)

    logger.debug(
        f"{name} for step {int(ctx.surface_step)}: no step reaches {threshold}:1, "
        f"blending {ctx.direction.fallback_color.to_hex()}"
    )
    fallback = ctx.direction.fallback_color
    solution = solver.solve(fallback, ctx.surface, threshold, AlphaMode.AT_LEAST)
    return ctx.result(fallback, ctx.contrasting_step, alpha=solution.alpha)


def bold_scale(ctx: RuleContext, solver: AlphaSolver) -> ScaleResult:
    """First step from the primary toward the extreme reaching the Bold threshold."""
    return _anchored_scale(ctx, solver, ctx.config.bold_threshold, "Bold")


def bold_a11y_scale(ctx: RuleContext, solver: AlphaSolver) -> ScaleResult:
    """Bold with the accessible threshold, walked independently from the primary."""
    return _anchored_scale(ctx, solver, ctx.config.bold_a11y_threshold, "BoldA11Y")


def heavy_scale(
    ctx: RuleContext, bold: ScaleResult, bold_a11y: ScaleResult
) -> ScaleResult:
    """
    Heavy, depending on the contrast direction.

    Toward dark: the step midway between Bold's step and the dark extreme
    (halves round toward the light end), capped at ``heavy_cap_step`` so it
    is never lighter than that step.

    Toward light: BoldA11Y's result, unless BoldA11Y sits more than
    ``heavy_max_distance`` positions from the surface, in which case the
    light extreme.
    """
    if ctx.direction is Direction.TOWARD_DARK:
        extreme_index = ctx.contrasting_step.index
        midpoint = math.floor((bold.source_step.index + extreme_index) / 2 + 0.5)
        target = min(RampPosition.from_index(midpoint), ctx.config.heavy_cap_step)
        return ctx.result_at(target)

    if bold_a11y.source_step == ctx.contrasting_step:
        return bold_a11y
    if ctx.surface_step.distance(bold_a11y.source_step) > ctx.config.heavy_max_distance:
        return ctx.result_at(ctx.contrasting_step)
    return bold_a11y


def minimal_scale(ctx: RuleContext) -> ScaleResult:
    """
    Fixed offset from the surface toward the middle of the ramp.

    Surfaces below ``minimal_pivot_step`` move toward the light end, the
    rest toward the dark end; the target is clamped to the ramp.
    """
    offset = ctx.config.minimal_offset
    if ctx.surface_step < ctx.config.minimal_pivot_step:
        target = ctx.surface_step.offset(offset)
    else:
        target = ctx.surface_step.offset(-offset)
    return ctx.result_at(target)


# =============================================================================
# Rule set
# =============================================================================


class ScaleRuleSet:
    """
    Evaluates all eight rules for one surface step in dependency order.

    Parameters
    ----------
    config : ScaleConfig, optional
        Rule constants. Defaults to :data:`DEFAULT_CONFIG`.
    """

    def __init__(self, config: ScaleConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.solver = AlphaSolver.from_config(self.config)

    def context(
        self,
        surface_step: RampPosition,
        palette: Palette,
        primary_step: RampPosition | None = None,
    ) -> RuleContext | None:
        return RuleContext.for_step(surface_step, palette, primary_step, self.config)

    def evaluate(self, ctx: RuleContext) -> StepScales:
        surface = surface_scale(ctx)
        high = high_scale(ctx)
        low = low_scale(ctx, self.solver)
        medium = medium_scale(ctx, low)
        bold = bold_scale(ctx, self.solver)
        bold_a11y = bold_a11y_scale(ctx, self.solver)
        heavy = heavy_scale(ctx, bold, bold_a11y)
        minimal = minimal_scale(ctx)

        return StepScales(
            surface=surface,
            high=high,
            medium=medium,
            low=low,
            heavy=heavy,
            bold=bold,
            bold_a11y=bold_a11y,
            minimal=minimal,
        )
