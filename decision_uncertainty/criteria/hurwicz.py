"""
Hurwicz criterion (optimism-weighted).

H = alpha * best + (1 - alpha) * worst, where best and worst are the
row extremes in the matrix orientation: for profits best is the row
maximum, for costs it is the row minimum.

alpha = 1 reproduces the Maximax scores, alpha = 0 the Maximin scores.
"""

from __future__ import annotations

import math
from numbers import Real

import numpy as np

from decision_uncertainty.criteria.base import Criterion, CriterionContext, extreme_name, format_entry, format_set
from decision_uncertainty.errors import RangeError


def check_alpha(alpha: float) -> float:
    """Validate an optimism coefficient. Out-of-range values are rejected, never clamped."""
    if isinstance(alpha, bool) or not isinstance(alpha, Real):
        raise RangeError(f"Optimism coefficient must be a number, got {alpha!r}")
    value = float(alpha)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise RangeError(f"Optimism coefficient must be in [0, 1], got {alpha}")
    return value


class HurwiczCriterion(Criterion):
    """Blend of best and worst case weighted by the optimism coefficient."""

    key = "hurwicz"

    def __init__(self, alpha: float = 0.5):
        self.alpha = check_alpha(alpha)

    def _extremes(self, context: CriterionContext):
        direction = context.matrix.direction
        grid = context.grid
        return direction.extreme(grid, axis=1), direction.opposite.extreme(grid, axis=1)

    def score(self, context: CriterionContext) -> np.ndarray:
        best, worst = self._extremes(context)
        return self.alpha * best + (1.0 - self.alpha) * worst

    def explain(self, context: CriterionContext, index: int, value: float) -> str:
        direction = context.matrix.direction
        row = context.matrix.row(index)
        best = direction.extreme(row)
        worst = direction.opposite.extreme(row)
        a = f"{self.alpha:.2f}"
        b = f"{1.0 - self.alpha:.2f}"
        return (
            f"{context.label(index)}: "
            f"{a} × {extreme_name(direction)}{format_set(row)} + "
            f"{b} × {extreme_name(direction.opposite)}{format_set(row)} = "
            f"{a} × {format_entry(best)} + {b} × {format_entry(worst)} = {context.fmt(value)}"
        )

    def title(self, context: CriterionContext) -> str:
        return f"Hurwicz (α={self.alpha:.2f})"

    def description(self, context: CriterionContext) -> str:
        outcome = "cost" if context.matrix.is_cost else "profit"
        return (
            f"Weighted average of the best and worst {outcome} "
            f"with optimism coefficient α={self.alpha:.2f}"
        )

    def __repr__(self) -> str:
        return f"HurwiczCriterion(alpha={self.alpha})"
