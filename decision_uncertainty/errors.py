"""
Error taxonomy for decision evaluation.

Every error is a ValueError subclass so callers that already guard
against bad input with ``except ValueError`` keep working.
"""


class DecisionError(ValueError):
    """Base class for all invalid-input errors raised by the package."""


class MatrixError(DecisionError):
    """A payoff matrix violates one of its invariants."""


class ShapeError(MatrixError):
    """Alternatives or states are empty, or the value grid is not rectangular."""


class DuplicateIdError(MatrixError):
    """Two alternatives (or two states) share the same id."""


class RangeError(DecisionError):
    """A numeric setting (optimism coefficient, precision) is out of range."""


class UnknownExampleError(KeyError):
    """No built-in example matrix exists under the requested name."""
