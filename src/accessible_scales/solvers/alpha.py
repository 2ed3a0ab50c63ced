"""
Alpha solving for target contrast.

Finds the opacity at which a foreground composited over a surface reaches
a target contrast ratio with that surface. At alpha 0 the blend is the
surface itself (contrast 1); at alpha 1 it is the foreground. Contrast
grows monotonically in between, so a bisection over [0, 1] converges.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from ..color.luminance import ColorLike, as_color, contrast_ratio
from ..color.model import Color
from ..config import DEFAULT_CONFIG, AlphaMode, ScaleConfig


@dataclass(frozen=True)
class AlphaSolution:
    """Outcome of an alpha search.

    Attributes
    ----------
    alpha : float
        Opacity found, in [0, 1].
    contrast_ratio : float
        Contrast of the blended color against the background.
    blended : Color
        Opaque result of compositing the foreground at ``alpha``.
    iterations : int
        Bisection steps taken.
    converged : bool
        False when the bracket did not shrink below tolerance within the
        iteration budget, or the target is out of reach at alpha 1.
    """

    alpha: float
    contrast_ratio: float
    blended: Color
    iterations: int
    converged: bool


class AlphaSolver:
    """
    Bisection search over alpha for a target contrast ratio.

    Parameters
    ----------
    tolerance : float, default=0.001
        Stop once the alpha bracket is narrower than this.
    max_iterations : int, default=50
        Hard cap on bisection steps.

    Examples
    --------
    >>> solver = AlphaSolver()
    >>> solution = solver.solve("#000000", "#ffffff", 4.5, AlphaMode.AT_LEAST)
    >>> solution.contrast_ratio >= 4.5
    True
    """

    def __init__(self, tolerance: float = 0.001, max_iterations: int = 50) -> None:
        self.tolerance = tolerance
        self.max_iterations = max_iterations

    @classmethod
    def from_config(cls, config: ScaleConfig) -> AlphaSolver:
        return cls(tolerance=config.alpha_tolerance, max_iterations=config.max_iterations)

    def _evaluate(
        self, foreground: Color, background: Color, alpha: float, iterations: int
    ) -> AlphaSolution:
        blended = foreground.blend_over(background, alpha)
        return AlphaSolution(
            alpha=alpha,
            contrast_ratio=contrast_ratio(blended, background),
            blended=blended,
            iterations=iterations,
            converged=True,
        )

    def solve(
        self,
        foreground: ColorLike,
        background: ColorLike,
        target: float,
        mode: AlphaMode = AlphaMode.AT_LEAST,
    ) -> AlphaSolution:
        """
        Find an alpha for ``foreground`` over ``background`` hitting ``target``.

        Parameters
        ----------
        foreground : Color | str
            Color being made translucent.
        background : Color | str
            Opaque surface underneath.
        target : float
            Desired contrast ratio.
        mode : AlphaMode, default=AlphaMode.AT_LEAST
            ``AT_LEAST`` returns the smallest alpha whose contrast meets or
            exceeds the target. ``NEAREST`` returns the alpha whose contrast
            is closest to the target from either side.

        Returns
        -------
        AlphaSolution
            Never raises; if the search cannot converge the best alpha
            found is returned with ``converged=False``.
        """
        fg = as_color(foreground).opaque()
        bg = as_color(background).opaque()

        if target <= 1.0:
            return self._evaluate(fg, bg, 0.0, 0)

        full = self._evaluate(fg, bg, 1.0, 0)
        if full.contrast_ratio < target:
            logger.debug(
                f"Target {target:.2f} unreachable for {fg.to_hex()} over {bg.to_hex()} "
                f"(max {full.contrast_ratio:.2f}); using full opacity"
            )
            return AlphaSolution(
                alpha=1.0,
                contrast_ratio=full.contrast_ratio,
                blended=full.blended,
                iterations=0,
                converged=False,
            )

        low, high = 0.0, 1.0
        satisfying = full
        nearest = full
        iterations = 0

        while high - low > self.tolerance and iterations < self.max_iterations:
            mid = (low + high) / 2
            iterations += 1
            candidate = self._evaluate(fg, bg, mid, iterations)

            if abs(candidate.contrast_ratio - target) < abs(nearest.contrast_ratio - target):
                nearest = candidate

            if candidate.contrast_ratio >= target:
                high = mid
                satisfying = candidate
            else:
                low = mid

        converged = high - low <= self.tolerance
        if not converged:
            logger.debug(
                f"Alpha search stopped after {iterations} iterations "
                f"with bracket [{low:.4f}, {high:.4f}]"
            )

        best = satisfying if mode is AlphaMode.AT_LEAST else nearest
        return AlphaSolution(
            alpha=best.alpha,
            contrast_ratio=best.contrast_ratio,
            blended=best.blended,
            iterations=iterations,
            converged=converged,
        )


def find_alpha_for_contrast(
    foreground: ColorLike,
    background: ColorLike,
    target: float,
    mode: AlphaMode = AlphaMode.AT_LEAST,
    config: ScaleConfig | None = None,
) -> float:
    """Alpha for ``foreground`` over ``background`` reaching ``target`` contrast."""
    solver = AlphaSolver.from_config(config or DEFAULT_CONFIG)
    return solver.solve(foreground, background, target, mode).alpha
