"""
Tests for the decision engine.
"""

import numpy as np
import pytest
from decision_uncertainty import evaluate
from decision_uncertainty.engine.evaluator import (
    CRITERIA_ORDER,
    DecisionEngine,
    DecisionResults,
    EngineConfig,
)
from decision_uncertainty.engine.matrix import PayoffMatrix
from decision_uncertainty.errors import MatrixError, RangeError, ShapeError


ROWS = [
    [3, 8, 2, 10],
    [5, 4, 6, 3],
    [9, 6, 4, 5],
]


def make_matrix(is_cost=False):
    return PayoffMatrix.from_rows(ROWS, is_cost=is_cost)


def random_matrix(seed):
    rng = np.random.default_rng(seed)
    shape = (int(rng.integers(1, 6)), int(rng.integers(1, 6)))
    rows = rng.integers(-20, 20, size=shape).tolist()
    return PayoffMatrix.from_rows(rows, is_cost=bool(rng.integers(0, 2)))


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.alpha == 0.5
        assert config.precision == 2

    def test_invalid_alpha(self):
        with pytest.raises(RangeError):
            EngineConfig(alpha=2.0)

    @pytest.mark.parametrize("precision", [-1, 1.5, True])
    def test_invalid_precision(self, precision):
        with pytest.raises(RangeError):
            EngineConfig(precision=precision)


class TestProfitScenario:
    """Worked example: profit orientation, alpha = 0.5."""

    @pytest.fixture
    def results(self):
        return DecisionEngine().evaluate(make_matrix(), alpha=0.5)

    def test_result_order(self, results):
        assert [r.key for r in results.results] == list(CRITERIA_ORDER)
        assert len(results.results) == 5

    def test_laplace(self, results):
        r = results.get("laplace")
        assert r.values == [5.75, 4.5, 6.0]
        assert r.optimal_index == 2

    def test_maximax(self, results):
        r = results.get("maximax")
        assert r.values == [10, 6, 9]
        assert r.optimal_index == 0

    def test_maximin(self, results):
        r = results.get("maximin")
        assert r.values == [2, 3, 4]
        assert r.optimal_index == 2

    def test_hurwicz(self, results):
        r = results.get("hurwicz")
        assert r.values == [6.0, 4.5, 6.5]
        assert r.optimal_index == 2

    def test_regret_and_savage(self, results):
        assert results.regret_matrix == [
            [6, 0, 4, 0],
            [4, 4, 0, 7],
            [0, 2, 2, 5],
        ]
        r = results.get("savage")
        assert r.values == [6, 7, 5]
        assert r.optimal_index == 2

    def test_optimal_alternatives(self, results):
        chosen = results.optimal_alternatives()

        assert chosen["maximax"].id == "a1"
        assert chosen["savage"].id == "a3"
        assert results.optimal_alternative("laplace").name == "Alternative 3"

    def test_unknown_key(self, results):
        with pytest.raises(KeyError):
            results.get("bayes")


class TestCostScenario:
    """Same numbers read as costs."""

    @pytest.fixture
    def results(self):
        return evaluate(make_matrix(is_cost=True), alpha=0.5)

    def test_best_case_uses_row_minimum(self, results):
        r = results.get("maximax")
        assert r.values == [2, 3, 4]
        assert r.optimal_index == 0

    def test_worst_case_uses_row_maximum(self, results):
        r = results.get("maximin")
        assert r.values == [10, 6, 9]
        assert r.optimal_index == 1

    def test_laplace_and_hurwicz_minimise(self, results):
        assert results.get("laplace").optimal_index == 1
        assert results.get("hurwicz").optimal_index == 1

    def test_savage(self, results):
        assert results.get("savage").values == [7, 4, 6]
        assert results.get("savage").optimal_index == 1


class TestDecisionEngine:
    """Tests for DecisionEngine behaviour."""

    def test_alpha_defaults_to_config(self):
        engine = DecisionEngine(EngineConfig(alpha=1.0))
        results = engine.evaluate(make_matrix())

        assert results.alpha == 1.0
        assert results.get("hurwicz").values == results.get("maximax").values

    def test_explicit_alpha_overrides_config(self):
        engine = DecisionEngine(EngineConfig(alpha=1.0))
        results = engine.evaluate(make_matrix(), alpha=0.0)

        assert results.get("hurwicz").values == results.get("maximin").values

    @pytest.mark.parametrize("alpha", [-0.01, 1.5, float("nan")])
    def test_rejects_alpha_out_of_range(self, alpha):
        with pytest.raises(RangeError):
            DecisionEngine().evaluate(make_matrix(), alpha=alpha)

    def test_alpha_bounds_accepted(self):
        DecisionEngine().evaluate(make_matrix(), alpha=0.0)
        DecisionEngine().evaluate(make_matrix(), alpha=1.0)

    def test_accepts_dict(self):
        results = DecisionEngine().evaluate(make_matrix().to_dict())

        assert isinstance(results, DecisionResults)
        assert results.get("savage").optimal_index == 2

    def test_dict_shape_error(self):
        bad = {"alternatives": ["a", "b"], "states": ["x"], "values": [[1], [2, 3]]}

        with pytest.raises(ShapeError):
            DecisionEngine().evaluate(bad)

    def test_rejects_other_types(self):
        with pytest.raises(MatrixError):
            DecisionEngine().evaluate([[1, 2], [3, 4]])

    def test_idempotent(self):
        engine = DecisionEngine()
        matrix = make_matrix()

        first = engine.evaluate(matrix, alpha=0.3)
        second = engine.evaluate(matrix, alpha=0.3)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_does_not_mutate_matrix(self):
        matrix = make_matrix()
        before = matrix.to_dict()

        DecisionEngine().evaluate(matrix, alpha=0.7)

        assert matrix.to_dict() == before

    def test_results_are_fresh_objects(self):
        engine = DecisionEngine()
        matrix = make_matrix()

        first = engine.evaluate(matrix)
        second = engine.evaluate(matrix)

        assert first is not second
        assert first.results[0] is not second.results[0]

    @pytest.mark.parametrize("seed", range(25))
    def test_optimal_index_valid(self, seed):
        matrix = random_matrix(seed)
        results = evaluate(matrix, alpha=0.4)

        for r in results.results:
            assert 0 <= r.optimal_index < matrix.n_alternatives
            assert r.optimal_value == r.values[r.optimal_index]
            assert len(r.values) == matrix.n_alternatives
            assert len(r.calculations) == matrix.n_alternatives

    @pytest.mark.parametrize("seed", range(10))
    def test_regret_shape(self, seed):
        matrix = random_matrix(seed)
        results = evaluate(matrix)

        assert np.array(results.regret_matrix).shape == matrix.shape

    def test_ties_pick_lowest_index_everywhere(self):
        matrix = PayoffMatrix.from_rows([[7, 7], [7, 7]])
        results = evaluate(matrix)

        assert [r.optimal_index for r in results.results] == [0, 0, 0, 0, 0]

    def test_describe(self):
        text = evaluate(make_matrix()).describe()

        assert "profit" in text
        assert "Savage (Minimax Regret)" in text
        assert "Optimal: Alternative 3" in text
