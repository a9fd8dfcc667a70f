"""
Decision Uncertainty

Classical decision rules for choosing among alternatives when the
probabilities of the possible states are unknown.

Given a payoff matrix (alternatives x states, profits or costs) and an
optimism coefficient, the engine evaluates the Laplace, Maximax, Maximin
(Wald), Hurwicz and Savage (minimax regret) rules.
"""

# engine must load before criteria: the evaluator imports the criteria package
from decision_uncertainty.engine import (
    Alternative,
    State,
    PayoffMatrix,
    Direction,
    build_regret,
    DecisionEngine,
    DecisionResults,
    EngineConfig,
    evaluate,
)
from decision_uncertainty.criteria import Criterion, CriterionResult
from decision_uncertainty.errors import DecisionError, MatrixError, ShapeError, RangeError

__version__ = "0.1.0"

__all__ = [
    # Data model
    "Alternative",
    "State",
    "PayoffMatrix",
    "Direction",
    # Evaluation
    "build_regret",
    "DecisionEngine",
    "DecisionResults",
    "EngineConfig",
    "evaluate",
    "Criterion",
    "CriterionResult",
    # Errors
    "DecisionError",
    "MatrixError",
    "ShapeError",
    "RangeError",
]
