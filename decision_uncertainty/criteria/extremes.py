"""
Best-case and worst-case criteria.

Both look at one extreme of each row. For profits the best case is the
row maximum and the worst case the row minimum; for costs the roles swap,
so that "best" and "worst" keep their meaning in both orientations.

| Rule     | profit               | cost                 |
|----------|----------------------|----------------------|
| Maximax  | row max, pick max    | row min, pick min    |
| Maximin  | row min, pick max    | row max, pick min    |
"""

from __future__ import annotations

from abc import abstractmethod

import numpy as np

from decision_uncertainty.criteria.base import (
    Criterion,
    CriterionContext,
    extreme_name,
    format_entry,
    format_set,
)
from decision_uncertainty.engine.matrix import Direction


class _RowExtremeCriterion(Criterion):
    """Scores each row by one of its extremes."""

    @abstractmethod
    def row_direction(self, context: CriterionContext) -> Direction:
        """Which extreme of each row is the score."""
        pass

    def score(self, context: CriterionContext) -> np.ndarray:
        return self.row_direction(context).extreme(context.grid, axis=1)

    def explain(self, context: CriterionContext, index: int, value: float) -> str:
        op = extreme_name(self.row_direction(context))
        row = context.matrix.row(index)
        return f"{context.label(index)}: {op}{format_set(row)} = {format_entry(value)}"


class MaximaxCriterion(_RowExtremeCriterion):
    """Optimistic rule: the best an alternative can possibly do."""

    key = "maximax"

    def row_direction(self, context: CriterionContext) -> Direction:
        return context.matrix.direction

    def title(self, context: CriterionContext) -> str:
        return "Optimistic (Minimin)" if context.matrix.is_cost else "Optimistic (Maximax)"

    def description(self, context: CriterionContext) -> str:
        if context.matrix.is_cost:
            return "Selects the alternative with the lowest minimum cost"
        return "Selects the alternative with the highest maximum profit"


class MaximinCriterion(_RowExtremeCriterion):
    """Pessimistic (Wald) rule: guard against the worst an alternative can do."""

    key = "maximin"

    def row_direction(self, context: CriterionContext) -> Direction:
        return context.matrix.direction.opposite

    def title(self, context: CriterionContext) -> str:
        return "Pessimistic (Minimax)" if context.matrix.is_cost else "Pessimistic (Maximin)"

    def description(self, context: CriterionContext) -> str:
        if context.matrix.is_cost:
            return "Selects the alternative with the lowest maximum cost"
        return "Selects the alternative with the highest minimum profit"
