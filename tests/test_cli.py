"""
Tests for the command-line interface.
"""

import json

import pytest
from decision_uncertainty.cli import load_matrix, main
from decision_uncertainty.errors import DecisionError


def write_matrix(tmp_path, data, name="matrix.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


MATRIX = {
    "alternatives": ["Small plant", "Large plant"],
    "states": ["Low demand", "High demand"],
    "values": [[40, 60], [-20, 120]],
}


class TestMain:
    """Tests for CLI commands."""

    def test_examples(self, capsys):
        assert main(["examples"]) == 0

        out = capsys.readouterr().out
        assert "example1: 3 alternatives x 4 states (profit)" in out
        assert "example2" in out

    def test_example(self, capsys):
        assert main(["example", "example1"]) == 0

        out = capsys.readouterr().out
        assert "Laplace" in out
        assert "Savage (Minimax Regret)" in out

    def test_example_json_to_stdout(self, capsys):
        assert main(["example", "example1", "--format", "json", "--alpha", "1"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["alpha"] == 1.0
        assert data["results"][3]["values"] == data["results"][1]["values"]

    def test_unknown_example(self, capsys):
        assert main(["example", "nope"]) == 2

        assert "error: Unknown example 'nope'" in capsys.readouterr().err

    def test_alpha_out_of_range(self, capsys):
        assert main(["example", "example1", "--alpha", "1.5"]) == 2

        assert "error:" in capsys.readouterr().err

    def test_negative_precision(self, capsys):
        assert main(["example", "example1", "--precision", "-1"]) == 2

        assert "error: precision must be a non-negative integer" in capsys.readouterr().err

    def test_string_is_cost_rejected(self, tmp_path, capsys):
        path = write_matrix(tmp_path, dict(MATRIX, is_cost="false"))

        assert main(["evaluate", path]) == 2

        assert "error: is_cost must be true or false" in capsys.readouterr().err

    def test_evaluate_file(self, tmp_path, capsys):
        path = write_matrix(tmp_path, MATRIX)

        assert main(["evaluate", path]) == 0

        out = capsys.readouterr().out
        assert "Large plant" in out
        assert "(profit" in out

    def test_evaluate_as_cost(self, tmp_path, capsys):
        path = write_matrix(tmp_path, MATRIX)

        assert main(["evaluate", path, "--cost", "-f", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["matrix"]["is_cost"] is True
        # Worst-case cost: max(40, 60)=60 vs max(-20, 120)=120
        assert data["results"][2]["optimal_index"] == 0

    def test_evaluate_writes_report(self, tmp_path, capsys):
        path = write_matrix(tmp_path, MATRIX)
        out_file = tmp_path / "report.md"

        assert main(["evaluate", path, "-o", str(out_file)]) == 0

        assert "Report saved to" in capsys.readouterr().out
        assert out_file.read_text(encoding="utf-8").startswith("# Decision analysis")

    def test_evaluate_jagged_matrix(self, tmp_path, capsys):
        path = write_matrix(tmp_path, dict(MATRIX, values=[[1, 2], [3]]))

        assert main(["evaluate", path]) == 2

        assert "Row 1 has 1 values" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["evaluate", str(tmp_path / "missing.json")]) == 1

        assert "error:" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == 0

        assert "usage" in capsys.readouterr().out


class TestLoadMatrix:
    """Tests for load_matrix."""

    def test_load(self, tmp_path):
        matrix = load_matrix(write_matrix(tmp_path, MATRIX))

        assert matrix.shape == (2, 2)
        assert matrix.alternatives[0].name == "Small plant"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DecisionError):
            load_matrix(str(path))

    def test_not_an_object(self, tmp_path):
        with pytest.raises(DecisionError):
            load_matrix(write_matrix(tmp_path, [[1, 2]]))
