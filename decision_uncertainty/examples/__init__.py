"""Example payoff matrices."""

from decision_uncertainty.examples.matrices import (
    create_example_matrices,
    get_example,
    list_examples,
)

__all__ = [
    "create_example_matrices",
    "get_example",
    "list_examples",
]
