"""
Laplace criterion (equal likelihood).

Treats every state as equally probable and scores an alternative by the
plain average of its row. Orientation only changes which average wins.
"""

from __future__ import annotations

import numpy as np

from decision_uncertainty.criteria.base import Criterion, CriterionContext, format_entry


class LaplaceCriterion(Criterion):
    """Mean of each row; best mean wins."""

    key = "laplace"

    def score(self, context: CriterionContext) -> np.ndarray:
        return np.mean(context.grid, axis=1)

    def explain(self, context: CriterionContext, index: int, value: float) -> str:
        row = context.matrix.row(index)
        terms = " + ".join(format_entry(v) for v in row)
        return f"{context.label(index)}: ({terms}) / {len(row)} = {context.fmt(value)}"

    def title(self, context: CriterionContext) -> str:
        return "Laplace"

    def description(self, context: CriterionContext) -> str:
        if context.matrix.is_cost:
            return "Assumes all states are equally likely (minimises the average cost)"
        return "Assumes all states are equally likely (maximises the average profit)"
