"""
Decision engine.

Runs every decision rule over one payoff matrix and bundles the results.
Evaluation is a pure function of (matrix, alpha): nothing is cached, the
matrix is never modified, and identical inputs give identical outputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from decision_uncertainty.criteria import (
    Criterion,
    CriterionContext,
    CriterionResult,
    HurwiczCriterion,
    LaplaceCriterion,
    MaximaxCriterion,
    MaximinCriterion,
    SavageCriterion,
    check_alpha,
)
from decision_uncertainty.engine.matrix import Alternative, PayoffMatrix
from decision_uncertainty.engine.regret import build_regret
from decision_uncertainty.errors import MatrixError, RangeError, ShapeError

logger = logging.getLogger(__name__)

CRITERIA_ORDER = ("laplace", "maximax", "maximin", "hurwicz", "savage")


@dataclass
class EngineConfig:
    """
    Configuration for the decision engine.

    Attributes:
        alpha: Default optimism coefficient for the Hurwicz rule
        precision: Decimals shown for derived numbers in derivations
    """
    alpha: float = 0.5
    precision: int = 2

    def __post_init__(self):
        self.alpha = check_alpha(self.alpha)
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise RangeError(f"precision must be a non-negative integer, got {self.precision!r}")


@dataclass
class DecisionResults:
    """
    Result bundle of one evaluation.

    Attributes:
        matrix: The evaluated payoff matrix
        results: One CriterionResult per rule, in CRITERIA_ORDER
        regret_matrix: Opportunity-loss grid, same shape as the matrix
        alpha: Optimism coefficient used for the Hurwicz rule
    """
    matrix: PayoffMatrix
    results: List[CriterionResult]
    regret_matrix: List[List[float]]
    alpha: float = 0.5

    def get(self, key: str) -> CriterionResult:
        """Look up a criterion result by key ("laplace", "savage", ...)."""
        for result in self.results:
            if result.key == key:
                return result
        raise KeyError(f"No result for criterion {key!r}")

    def optimal_alternative(self, key: str) -> Alternative:
        return self.matrix.alternatives[self.get(key).optimal_index]

    def optimal_alternatives(self) -> Dict[str, Alternative]:
        """Alternative selected by each criterion, keyed by criterion."""
        return {r.key: self.matrix.alternatives[r.optimal_index] for r in self.results}

    def describe(self) -> str:
        """Human-readable description."""
        lines = [
            f"Decision analysis ({self.matrix.orientation}, "
            f"{self.matrix.n_alternatives} alternatives x {self.matrix.n_states} states)",
            "",
        ]
        for result in self.results:
            lines.append(result.describe())
            chosen = self.matrix.alternatives[result.optimal_index].name
            lines.append(f"  Optimal: {chosen}")
            lines.append("")
        return "\n".join(lines).rstrip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matrix": self.matrix.to_dict(),
            "alpha": self.alpha,
            "results": [r.to_dict() for r in self.results],
            "regret_matrix": [list(row) for row in self.regret_matrix],
        }


class DecisionEngine:
    """
    Evaluates all decision rules for a payoff matrix.

    Example:
        engine = DecisionEngine(EngineConfig(alpha=0.7))
        results = engine.evaluate(matrix)
        print(results.optimal_alternative("savage").name)
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def criteria(self, alpha: float) -> List[Criterion]:
        """The rules in reporting order."""
        return [
            LaplaceCriterion(),
            MaximaxCriterion(),
            MaximinCriterion(),
            HurwiczCriterion(alpha),
            SavageCriterion(),
        ]

    def evaluate(
        self,
        matrix: Union[PayoffMatrix, Dict[str, Any]],
        alpha: Optional[float] = None,
    ) -> DecisionResults:
        """
        Evaluate every rule.

        Args:
            matrix: Payoff matrix (or its dict form)
            alpha: Optimism coefficient in [0, 1]; defaults to config.alpha

        Returns:
            DecisionResults with five criterion results and the regret matrix

        Raises:
            ShapeError: The matrix is empty or not rectangular
            RangeError: alpha lies outside [0, 1]
        """
        matrix = self._validate(matrix)
        alpha = check_alpha(self.config.alpha if alpha is None else alpha)

        regret = build_regret(matrix)
        context = CriterionContext(matrix=matrix, regret_matrix=regret, precision=self.config.precision)

        logger.debug(
            "Evaluating %dx%d %s matrix with alpha=%.2f",
            matrix.n_alternatives, matrix.n_states, matrix.orientation, alpha,
        )

        results = []
        for criterion in self.criteria(alpha):
            result = criterion.evaluate(context)
            logger.debug(
                "%s -> %s (%s)",
                result.key, matrix.alternatives[result.optimal_index].id, result.optimal_value,
            )
            results.append(result)

        return DecisionResults(
            matrix=matrix,
            results=results,
            regret_matrix=regret,
            alpha=alpha,
        )

    @staticmethod
    def _validate(matrix: Union[PayoffMatrix, Dict[str, Any]]) -> PayoffMatrix:
        if isinstance(matrix, dict):
            return PayoffMatrix.from_dict(matrix)
        if not isinstance(matrix, PayoffMatrix):
            raise MatrixError(f"Expected a PayoffMatrix, got {type(matrix).__name__}")

        shape = matrix.as_array().shape
        if shape != matrix.shape:
            raise ShapeError(f"Value grid has shape {shape}, labels describe {matrix.shape}")
        return matrix


def evaluate(matrix: Union[PayoffMatrix, Dict[str, Any]], alpha: float = 0.5) -> DecisionResults:
    """Evaluate all rules with a default engine."""
    return DecisionEngine().evaluate(matrix, alpha)
