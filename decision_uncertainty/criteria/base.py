"""
Criterion interface - Abstract base class for decision rules.

A Criterion turns a payoff matrix into one score per alternative and
selects the optimal alternative. Every rule is written once against a
selection Direction; the matrix orientation decides which Direction
applies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from decision_uncertainty.engine.matrix import Direction, PayoffMatrix
from decision_uncertainty.engine.regret import build_regret


@dataclass
class CriterionResult:
    """
    Outcome of applying one decision rule.

    Attributes:
        key: Stable identifier of the rule ("laplace", "savage", ...)
        name: Display name, may depend on orientation and alpha
        description: One-sentence explanation of the rule
        calculations: Human-readable derivation, one per alternative
        values: Score per alternative
        optimal_index: Index of the selected alternative
        optimal_value: Score of the selected alternative
        direction: Whether scores were maximised or minimised
    """
    key: str
    name: str
    description: str
    calculations: List[str]
    values: List[float]
    optimal_index: int
    optimal_value: float
    direction: Direction = Direction.MAXIMIZE

    def __post_init__(self):
        if not 0 <= self.optimal_index < len(self.values):
            raise ValueError(
                f"optimal_index {self.optimal_index} out of range for {len(self.values)} values"
            )
        if self.optimal_value != self.values[self.optimal_index]:
            raise ValueError("optimal_value must equal values[optimal_index]")

    def is_optimal(self, index: int) -> bool:
        return index == self.optimal_index

    def describe(self) -> str:
        """Human-readable description."""
        lines = [f"{self.name}", f"  {self.description}"]
        for i, calc in enumerate(self.calculations):
            marker = "  <- optimal" if self.is_optimal(i) else ""
            lines.append(f"    {calc}{marker}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "calculations": list(self.calculations),
            "values": list(self.values),
            "optimal_index": self.optimal_index,
            "optimal_value": self.optimal_value,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class CriterionContext:
    """
    Inputs shared by all criteria in one evaluation.

    Attributes:
        matrix: The payoff matrix being evaluated
        regret_matrix: Precomputed regret grid, built on demand if absent
        precision: Decimals used for derived numbers in derivation strings
    """
    matrix: PayoffMatrix
    regret_matrix: Optional[List[List[float]]] = None
    precision: int = 2
    _cache: Dict[str, Any] = field(default_factory=dict, init=False, repr=False, compare=False)

    @property
    def grid(self) -> np.ndarray:
        return self.matrix.as_array()

    @property
    def regret(self) -> List[List[float]]:
        if self.regret_matrix is not None:
            return self.regret_matrix
        if "regret" not in self._cache:
            self._cache["regret"] = build_regret(self.matrix)
        return self._cache["regret"]

    def label(self, index: int) -> str:
        """Display name of an alternative."""
        return self.matrix.alternatives[index].name

    def fmt(self, value: float) -> str:
        """Format a derived (computed) number."""
        return f"{value:.{self.precision}f}"


class Criterion(ABC):
    """
    Abstract base class for decision rules under uncertainty.

    Subclasses implement `score` (one number per alternative) and `explain`
    (the derivation string for one alternative). Selection and tie-breaking
    live here so every rule reports the lowest index among equally good
    alternatives.
    """

    key: str = ""

    @abstractmethod
    def score(self, context: CriterionContext) -> np.ndarray:
        """
        Compute the per-alternative scores.

        Args:
            context: Matrix and shared intermediate results

        Returns:
            1-D array with one score per alternative
        """
        pass

    @abstractmethod
    def explain(self, context: CriterionContext, index: int, value: float) -> str:
        """Derivation string for alternative ``index`` with score ``value``."""
        pass

    @abstractmethod
    def title(self, context: CriterionContext) -> str:
        pass

    @abstractmethod
    def description(self, context: CriterionContext) -> str:
        pass

    def selection(self, context: CriterionContext) -> Direction:
        """Direction in which scores are compared. Follows the matrix by default."""
        return context.matrix.direction

    def evaluate(self, source: Union[PayoffMatrix, CriterionContext]) -> CriterionResult:
        """
        Apply the rule.

        Args:
            source: A payoff matrix, or a context carrying one

        Returns:
            CriterionResult with scores, derivations and the optimal alternative
        """
        context = source if isinstance(source, CriterionContext) else CriterionContext(matrix=source)

        values = [float(v) for v in self.score(context)]
        direction = self.selection(context)
        optimal_index = direction.best_index(values)

        return CriterionResult(
            key=self.key,
            name=self.title(context),
            description=self.description(context),
            calculations=[self.explain(context, i, v) for i, v in enumerate(values)],
            values=values,
            optimal_index=optimal_index,
            optimal_value=values[optimal_index],
            direction=direction,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def format_entry(value: float) -> str:
    """Format a raw matrix entry: integers without a decimal point."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.10g}"


def format_set(values: Sequence[float]) -> str:
    return "{" + ", ".join(format_entry(v) for v in values) + "}"


def extreme_name(direction: Direction) -> str:
    return "max" if direction is Direction.MAXIMIZE else "min"
