"""
Opportunity-loss (regret) matrix.

Regret measures how much better the outcome could have been under a given
state had the best alternative for that state been chosen. It is always
non-negative, whatever the matrix orientation, and exactly zero for the
alternative that is ideal in a column.
"""

from __future__ import annotations

from typing import List

import numpy as np

from decision_uncertainty.engine.matrix import PayoffMatrix
from decision_uncertainty.errors import ShapeError


def ideal_outcomes(matrix: PayoffMatrix) -> List[float]:
    """
    Best achievable outcome per state.

    Column maximum for profit matrices, column minimum for cost matrices.
    """
    grid = _grid(matrix)
    return matrix.direction.extreme(grid, axis=0).tolist()


def build_regret(matrix: PayoffMatrix) -> List[List[float]]:
    """
    Derive the regret matrix.

    Regret = ideal - value for profits, value - ideal for costs.

    Args:
        matrix: Validated payoff matrix

    Returns:
        Grid of the same shape as ``matrix.values``
    """
    grid = _grid(matrix)
    direction = matrix.direction
    ideal = direction.extreme(grid, axis=0)
    return direction.shortfall(ideal, grid).tolist()


def _grid(matrix: PayoffMatrix) -> np.ndarray:
    grid = matrix.as_array()
    if grid.ndim != 2 or grid.size == 0:
        raise ShapeError(f"Regret needs a non-empty rectangular grid, got shape {grid.shape}")
    return grid
