"""
Side-by-side comparison of decision rules.

Lays the per-alternative scores of every rule out as one table, marking
the alternative each rule selects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from decision_uncertainty.engine.evaluator import DecisionResults
    from decision_uncertainty.engine.matrix import Alternative


@dataclass
class ComparisonRow:
    """
    Scores of one alternative under every rule.

    Attributes:
        alternative: The alternative this row describes
        scores: Score per criterion key
        selected_by: Keys of the rules that select this alternative
    """
    alternative: "Alternative"
    scores: Dict[str, float]
    selected_by: List[str] = field(default_factory=list)

    @property
    def selection_count(self) -> int:
        return len(self.selected_by)


@dataclass
class CriteriaComparison:
    """
    Comparison table across all rules of one evaluation.

    Attributes:
        columns: (criterion key, short rule name) in reporting order
        rows: One row per alternative, in matrix order
        orientation: "profit" or "cost"
        alpha: Optimism coefficient used for Hurwicz
    """
    columns: List[Tuple[str, str]]
    rows: List[ComparisonRow]
    orientation: str
    alpha: float

    @classmethod
    def from_results(cls, results: "DecisionResults") -> "CriteriaComparison":
        columns = [(r.key, short_name(r.name)) for r in results.results]

        rows = []
        for i, alternative in enumerate(results.matrix.alternatives):
            rows.append(ComparisonRow(
                alternative=alternative,
                scores={r.key: r.values[i] for r in results.results},
                selected_by=[r.key for r in results.results if r.optimal_index == i],
            ))

        return cls(
            columns=columns,
            rows=rows,
            orientation=results.matrix.orientation,
            alpha=results.alpha,
        )

    def selection_counts(self) -> Dict[str, int]:
        """Number of rules selecting each alternative, keyed by alternative id."""
        return {row.alternative.id: row.selection_count for row in self.rows}

    def describe(self, precision: int = 2) -> str:
        """Plain-text table; selected cells carry a trailing '*'."""
        name_width = max(len("Alternative"), *(len(r.alternative.name) for r in self.rows))
        widths = [max(len(title), 10) for _, title in self.columns]

        header = "Alternative".ljust(name_width) + "".join(
            f"  {title:>{w}}" for (_, title), w in zip(self.columns, widths)
        )
        lines = [header, "-" * len(header)]

        for row in self.rows:
            cells = []
            for (key, _), w in zip(self.columns, widths):
                mark = "*" if key in row.selected_by else " "
                cells.append(f"  {row.scores[key]:>{w - 1}.{precision}f}{mark}")
            lines.append(row.alternative.name.ljust(name_width) + "".join(cells))

        lines.append("")
        lines.append("* = optimal under that rule")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orientation": self.orientation,
            "alpha": self.alpha,
            "columns": [{"key": key, "name": title} for key, title in self.columns],
            "rows": [
                {
                    "alternative": row.alternative.to_dict(),
                    "scores": dict(row.scores),
                    "selected_by": list(row.selected_by),
                }
                for row in self.rows
            ],
        }


def short_name(name: str) -> str:
    """Rule name without its parenthesised qualifier: "Hurwicz (α=0.50)" -> "Hurwicz"."""
    return name.split(" (")[0]
