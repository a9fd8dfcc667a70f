"""
Savage criterion (minimax regret).

Works on the regret matrix, whose entries are non-negative losses in both
orientations, so this rule always minimises: pick the alternative whose
largest regret is smallest.
"""

from __future__ import annotations

import numpy as np

from decision_uncertainty.criteria.base import Criterion, CriterionContext, format_entry, format_set
from decision_uncertainty.engine.matrix import Direction


class SavageCriterion(Criterion):
    """Minimise the maximum regret."""

    key = "savage"

    def score(self, context: CriterionContext) -> np.ndarray:
        return np.max(np.asarray(context.regret, dtype=float), axis=1)

    def selection(self, context: CriterionContext) -> Direction:
        return Direction.MINIMIZE

    def explain(self, context: CriterionContext, index: int, value: float) -> str:
        row = context.regret[index]
        return f"{context.label(index)}: max{format_set(row)} = {format_entry(value)}"

    def title(self, context: CriterionContext) -> str:
        return "Savage (Minimax Regret)"

    def description(self, context: CriterionContext) -> str:
        if context.matrix.is_cost:
            return "Minimises the maximum regret (extra cost over the best choice for each state)"
        return "Minimises the maximum regret (opportunity loss)"
