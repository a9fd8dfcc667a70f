"""
Built-in example matrices.

Classroom exercises used to demonstrate the decision rules.
"""

from typing import Dict, List

from decision_uncertainty.engine.matrix import PayoffMatrix
from decision_uncertainty.errors import UnknownExampleError


def create_example_matrices() -> Dict[str, PayoffMatrix]:
    """Create the set of available example matrices."""
    return {
        "example1": PayoffMatrix.from_rows(
            [
                [3, 8, 2, 10],
                [5, 4, 6, 3],
                [9, 6, 4, 5],
            ],
            is_cost=False,
        ),
        "example2": PayoffMatrix.from_rows(
            [
                [10, 4, 7],
                [5, 8, 6],
                [8, 5, 4],
                [6, 7, 9],
            ],
            is_cost=False,
        ),
    }


def list_examples() -> List[str]:
    return sorted(create_example_matrices())


def get_example(name: str) -> PayoffMatrix:
    """
    Get an example matrix by name.

    Raises:
        UnknownExampleError: No example is registered under ``name``
    """
    examples = create_example_matrices()
    if name not in examples:
        raise UnknownExampleError(
            f"Unknown example {name!r}; available: {', '.join(sorted(examples))}"
        )
    return examples[name]
