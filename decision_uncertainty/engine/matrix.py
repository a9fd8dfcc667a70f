"""
Payoff matrix data model.

A PayoffMatrix is an immutable grid of outcomes indexed by alternative
(rows) and environmental state (columns). Matrices are validated once, at
construction, so every evaluator downstream can rely on a non-empty,
rectangular grid of finite numbers.

Editing helpers never modify a matrix in place; they return a new one,
the same way WorldState-style snapshots evolve.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar, Union

import numpy as np

from decision_uncertainty.errors import DuplicateIdError, MatrixError, ShapeError


class Direction(Enum):
    """
    Selection direction of a score.

    Profit matrices are maximised and cost matrices minimised; every rule is
    written once against a Direction instead of once per orientation.
    """
    MAXIMIZE = "max"
    MINIMIZE = "min"

    @property
    def opposite(self) -> "Direction":
        if self is Direction.MAXIMIZE:
            return Direction.MINIMIZE
        return Direction.MAXIMIZE

    def extreme(self, values: Any, axis: Optional[int] = None) -> Any:
        """Most favourable value (max or min) along ``axis``."""
        arr = np.asarray(values, dtype=float)
        if self is Direction.MAXIMIZE:
            return np.max(arr, axis=axis)
        return np.min(arr, axis=axis)

    def best_index(self, scores: Sequence[float]) -> int:
        """
        Index of the most favourable score.

        Ties resolve to the lowest index: numpy's argmax/argmin report the
        first occurrence.
        """
        arr = np.asarray(scores, dtype=float)
        if self is Direction.MAXIMIZE:
            return int(np.argmax(arr))
        return int(np.argmin(arr))

    def shortfall(self, ideal: Any, values: Any) -> Any:
        """Non-negative distance from ``values`` up (or down) to ``ideal``."""
        if self is Direction.MAXIMIZE:
            return ideal - values
        return values - ideal


@dataclass(frozen=True)
class Alternative:
    """A candidate choice (one matrix row)."""
    id: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class State:
    """An unknown environmental condition (one matrix column)."""
    id: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


LabelT = TypeVar("LabelT", Alternative, State)

LabelSpec = Union[Alternative, State, str, Dict[str, Any]]


@dataclass(frozen=True)
class PayoffMatrix:
    """
    Outcomes of each alternative under each state.

    Attributes:
        alternatives: Ordered rows, unique ids
        states: Ordered columns, unique ids
        values: Grid indexed [alternative][state]
        is_cost: True if entries are costs to minimise, False for profits
    """
    alternatives: Tuple[Alternative, ...]
    states: Tuple[State, ...]
    values: Tuple[Tuple[float, ...], ...]
    is_cost: bool = False

    def __post_init__(self):
        alternatives = tuple(_parse_labels(self.alternatives, Alternative, "a"))
        states = tuple(_parse_labels(self.states, State, "s"))

        if len(alternatives) == 0:
            raise ShapeError("Payoff matrix needs at least one alternative")
        if len(states) == 0:
            raise ShapeError("Payoff matrix needs at least one state")

        _check_unique(alternatives, "alternative")
        _check_unique(states, "state")

        object.__setattr__(self, "alternatives", alternatives)
        object.__setattr__(self, "states", states)
        object.__setattr__(
            self, "values", _normalize_values(self.values, len(alternatives), len(states))
        )
        if not isinstance(self.is_cost, (bool, np.bool_)):
            raise MatrixError(f"is_cost must be true or false, got {self.is_cost!r}")
        object.__setattr__(self, "is_cost", bool(self.is_cost))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[float]],
        is_cost: bool = False,
        alternatives: Optional[Sequence[LabelSpec]] = None,
        states: Optional[Sequence[LabelSpec]] = None,
    ) -> "PayoffMatrix":
        """
        Build a matrix from a bare grid.

        Labels default to "Alternative n" / "State n" with ids a1.. / s1..
        """
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0

        if alternatives is None:
            alternatives = [f"Alternative {i + 1}" for i in range(n_rows)]
        if states is None:
            states = [f"State {j + 1}" for j in range(n_cols)]

        return cls(alternatives=alternatives, states=states, values=rows, is_cost=is_cost)

    @classmethod
    def blank(cls, n_alternatives: int = 2, n_states: int = 2, is_cost: bool = False) -> "PayoffMatrix":
        """Zero-filled matrix, the starting point of an editing session."""
        return cls.from_rows(
            [[0.0] * n_states for _ in range(n_alternatives)],
            is_cost=is_cost,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PayoffMatrix":
        """
        Create from a plain dict (e.g. decoded JSON).

        ``alternatives`` and ``states`` may be lists of names or of
        ``{"id", "name"}`` objects.
        """
        for key in ("alternatives", "states", "values"):
            if key not in data:
                raise MatrixError(f"Payoff matrix is missing field '{key}'")

        return cls(
            alternatives=data["alternatives"],
            states=data["states"],
            values=data["values"],
            is_cost=data.get("is_cost", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alternatives": [a.to_dict() for a in self.alternatives],
            "states": [s.to_dict() for s in self.states],
            "values": [list(row) for row in self.values],
            "is_cost": self.is_cost,
        }

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def direction(self) -> Direction:
        """How scores derived from this matrix are selected."""
        return Direction.MINIMIZE if self.is_cost else Direction.MAXIMIZE

    @property
    def orientation(self) -> str:
        return "cost" if self.is_cost else "profit"

    @property
    def n_alternatives(self) -> int:
        return len(self.alternatives)

    @property
    def n_states(self) -> int:
        return len(self.states)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.n_alternatives, self.n_states)

    def as_array(self) -> np.ndarray:
        """Read-only float array of the grid."""
        arr = np.array(self.values, dtype=float)
        arr.setflags(write=False)
        return arr

    def row(self, index: int) -> Tuple[float, ...]:
        return self.values[index]

    def column(self, index: int) -> Tuple[float, ...]:
        return tuple(row[index] for row in self.values)

    # ------------------------------------------------------------------
    # Editing (each returns a new matrix)
    # ------------------------------------------------------------------

    def with_value(self, alt_index: int, state_index: int, value: float) -> "PayoffMatrix":
        self._check_alt(alt_index)
        self._check_state(state_index)
        rows = [list(row) for row in self.values]
        rows[alt_index][state_index] = value
        return replace(self, values=rows)

    def with_orientation(self, is_cost: bool) -> "PayoffMatrix":
        return replace(self, is_cost=is_cost)

    def add_alternative(self, name: Optional[str] = None) -> "PayoffMatrix":
        new_id = _next_id("a", self.alternatives)
        alt = Alternative(id=new_id, name=name or f"Alternative {self.n_alternatives + 1}")
        return replace(
            self,
            alternatives=self.alternatives + (alt,),
            values=self.values + ((0.0,) * self.n_states,),
        )

    def add_state(self, name: Optional[str] = None) -> "PayoffMatrix":
        new_id = _next_id("s", self.states)
        state = State(id=new_id, name=name or f"State {self.n_states + 1}")
        return replace(
            self,
            states=self.states + (state,),
            values=tuple(row + (0.0,) for row in self.values),
        )

    def remove_alternative(self, index: int) -> "PayoffMatrix":
        self._check_alt(index)
        if self.n_alternatives == 1:
            raise ShapeError("Cannot remove the only alternative")
        return replace(
            self,
            alternatives=self.alternatives[:index] + self.alternatives[index + 1:],
            values=self.values[:index] + self.values[index + 1:],
        )

    def remove_state(self, index: int) -> "PayoffMatrix":
        self._check_state(index)
        if self.n_states == 1:
            raise ShapeError("Cannot remove the only state")
        return replace(
            self,
            states=self.states[:index] + self.states[index + 1:],
            values=tuple(row[:index] + row[index + 1:] for row in self.values),
        )

    def rename_alternative(self, index: int, name: str) -> "PayoffMatrix":
        self._check_alt(index)
        alternatives = list(self.alternatives)
        alternatives[index] = replace(alternatives[index], name=name)
        return replace(self, alternatives=alternatives)

    def rename_state(self, index: int, name: str) -> "PayoffMatrix":
        self._check_state(index)
        states = list(self.states)
        states[index] = replace(states[index], name=name)
        return replace(self, states=states)

    def _check_alt(self, index: int) -> None:
        if not 0 <= index < self.n_alternatives:
            raise IndexError(f"Alternative index {index} out of range (0-{self.n_alternatives - 1})")

    def _check_state(self, index: int) -> None:
        if not 0 <= index < self.n_states:
            raise IndexError(f"State index {index} out of range (0-{self.n_states - 1})")


def _normalize_values(values: Any, n_rows: int, n_cols: int) -> Tuple[Tuple[float, ...], ...]:
    """Validate the grid shape and entries, returning nested float tuples."""
    if values is None or isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ShapeError("Payoff matrix values must be a grid of numbers")
    values = list(values)
    if len(values) == 0:
        raise ShapeError("Payoff matrix has no values")
    if len(values) != n_rows:
        raise ShapeError(f"Expected {n_rows} rows of values, got {len(values)}")

    rows = []
    for i, row in enumerate(values):
        if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise ShapeError(f"Row {i} is not a sequence of numbers")
        row = list(row)
        if len(row) != n_cols:
            raise ShapeError(f"Row {i} has {len(row)} values, expected {n_cols}")
        rows.append(tuple(_to_number(v, i, j) for j, v in enumerate(row)))

    return tuple(rows)


def _to_number(value: Any, i: int, j: int) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MatrixError(f"Value at [{i}][{j}] is not a number: {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise MatrixError(f"Value at [{i}][{j}] is not finite: {value}")
    return value


def _check_unique(labels: Sequence[Union[Alternative, State]], kind: str) -> None:
    seen = set()
    for label in labels:
        if label.id in seen:
            raise DuplicateIdError(f"Duplicate {kind} id: {label.id!r}")
        seen.add(label.id)


def _next_id(prefix: str, labels: Sequence[Union[Alternative, State]]) -> str:
    taken = {label.id for label in labels}
    n = len(labels) + 1
    while f"{prefix}{n}" in taken:
        n += 1
    return f"{prefix}{n}"


def _parse_labels(items: Iterable[LabelSpec], label_type: Type[LabelT], prefix: str) -> List[LabelT]:
    """Accept label objects, bare names, or {"id", "name"} dicts."""
    if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        raise MatrixError(f"Expected a list of {label_type.__name__.lower()} labels, got {items!r}")
    labels: List[LabelT] = []
    for n, item in enumerate(items, start=1):
        if isinstance(item, label_type):
            labels.append(item)
        elif isinstance(item, str):
            labels.append(label_type(id=f"{prefix}{n}", name=item))
        elif isinstance(item, dict):
            label_id = str(item.get("id", f"{prefix}{n}"))
            labels.append(label_type(id=label_id, name=str(item.get("name", label_id))))
        else:
            raise MatrixError(f"Cannot interpret {item!r} as a {label_type.__name__.lower()}")
    return labels
