"""Criteria module - Decision rules under uncertainty."""

from decision_uncertainty.criteria.base import Criterion, CriterionContext, CriterionResult
from decision_uncertainty.criteria.laplace import LaplaceCriterion
from decision_uncertainty.criteria.extremes import MaximaxCriterion, MaximinCriterion
from decision_uncertainty.criteria.hurwicz import HurwiczCriterion, check_alpha
from decision_uncertainty.criteria.savage import SavageCriterion

__all__ = [
    "Criterion",
    "CriterionContext",
    "CriterionResult",
    "LaplaceCriterion",
    "MaximaxCriterion",
    "MaximinCriterion",
    "HurwiczCriterion",
    "SavageCriterion",
    "check_alpha",
]
