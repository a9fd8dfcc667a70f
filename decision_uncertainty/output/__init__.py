"""Output module - Comparison tables and reporting."""

from decision_uncertainty.output.comparison import CriteriaComparison, ComparisonRow
from decision_uncertainty.output.reporter import Reporter, ReportFormat

__all__ = [
    "CriteriaComparison",
    "ComparisonRow",
    "Reporter",
    "ReportFormat",
]
