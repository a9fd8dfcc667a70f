"""Engine module - Payoff matrices, regret and rule evaluation."""

from decision_uncertainty.engine.matrix import Alternative, State, PayoffMatrix, Direction
from decision_uncertainty.engine.regret import build_regret, ideal_outcomes
from decision_uncertainty.engine.evaluator import (
    CRITERIA_ORDER,
    DecisionEngine,
    DecisionResults,
    EngineConfig,
    evaluate,
)

__all__ = [
    "Alternative",
    "State",
    "PayoffMatrix",
    "Direction",
    "build_regret",
    "ideal_outcomes",
    "CRITERIA_ORDER",
    "DecisionEngine",
    "DecisionResults",
    "EngineConfig",
    "evaluate",
]
