"""
Report generation for decision results.

Produces formatted reports in multiple formats (text, JSON, HTML, Markdown).
"""

from __future__ import annotations

import html
import json
from enum import Enum, auto
from typing import List, Optional, Sequence, TYPE_CHECKING

from decision_uncertainty.criteria.base import format_entry
from decision_uncertainty.output.comparison import CriteriaComparison

if TYPE_CHECKING:
    from decision_uncertainty.engine.evaluator import DecisionResults


class ReportFormat(Enum):
    """Available report formats."""
    TEXT = auto()
    JSON = auto()
    HTML = auto()
    MARKDOWN = auto()

    @classmethod
    def from_path(cls, filepath: str) -> "ReportFormat":
        """Infer the format from a file extension (text if unknown)."""
        lowered = filepath.lower()
        if lowered.endswith(".json"):
            return cls.JSON
        if lowered.endswith((".html", ".htm")):
            return cls.HTML
        if lowered.endswith(".md"):
            return cls.MARKDOWN
        return cls.TEXT


class Reporter:
    """
    Generates formatted reports from decision results.
    """

    def __init__(self, results: "DecisionResults", precision: int = 2):
        """
        Initialize reporter.

        Args:
            results: Evaluation results to report on
            precision: Decimals used for scores in tables
        """
        self.results = results
        self.precision = precision
        self.comparison = CriteriaComparison.from_results(results)

    def generate(self, format: ReportFormat = ReportFormat.TEXT) -> str:
        """
        Generate report in specified format.

        Args:
            format: Output format

        Returns:
            Formatted report string
        """
        if format == ReportFormat.TEXT:
            return self._generate_text()
        elif format == ReportFormat.JSON:
            return self._generate_json()
        elif format == ReportFormat.HTML:
            return self._generate_html()
        elif format == ReportFormat.MARKDOWN:
            return self._generate_markdown()
        else:
            raise ValueError(f"Unknown format: {format}")

    def _title(self) -> str:
        m = self.results.matrix
        return (
            f"Decision analysis: {m.n_alternatives} alternatives x {m.n_states} states "
            f"({m.orientation}, α={self.results.alpha:.2f})"
        )

    def _generate_text(self) -> str:
        """Generate plain text report."""
        m = self.results.matrix
        sections = [
            self._title(),
            "=" * 60,
            "",
            "PAYOFF MATRIX",
            "-" * 40,
            _text_grid(m, m.values),
            "",
            "REGRET MATRIX",
            "-" * 40,
            _text_grid(m, self.results.regret_matrix),
            "",
            "CRITERIA",
            "-" * 40,
            self.results.describe(),
            "",
            "COMPARISON",
            "-" * 40,
            self.comparison.describe(self.precision),
        ]
        return "\n".join(sections)

    def _generate_json(self) -> str:
        """Generate JSON report."""
        data = self.results.to_dict()
        data["comparison"] = self.comparison.to_dict()
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _generate_markdown(self) -> str:
        """Generate Markdown report."""
        m = self.results.matrix

        lines = [
            f"# {self._title()}",
            "",
            "## Payoff Matrix",
            "",
            *_markdown_grid(m, m.values),
            "",
            "## Regret Matrix",
            "",
            *_markdown_grid(m, self.results.regret_matrix),
            "",
            "## Criteria",
            "",
        ]

        for result in self.results.results:
            chosen = m.alternatives[result.optimal_index].name
            lines.extend([
                f"### {result.name}",
                "",
                result.description,
                "",
            ])
            for calc in result.calculations:
                lines.append(f"- `{calc}`")
            lines.extend(["", f"**Optimal:** {chosen} ({format_entry(result.optimal_value)})", ""])

        lines.extend([
            "## Comparison",
            "",
            "| Alternative | " + " | ".join(title for _, title in self.comparison.columns) + " |",
            "|---" * (len(self.comparison.columns) + 1) + "|",
        ])
        for row in self.comparison.rows:
            cells = []
            for key, _ in self.comparison.columns:
                cell = f"{row.scores[key]:.{self.precision}f}"
                cells.append(f"**{cell} ✓**" if key in row.selected_by else cell)
            lines.append(f"| {row.alternative.name} | " + " | ".join(cells) + " |")

        return "\n".join(lines) + "\n"

    def _generate_html(self) -> str:
        """Generate HTML report."""
        m = self.results.matrix

        criteria_html = []
        for result in self.results.results:
            chosen = html.escape(m.alternatives[result.optimal_index].name)
            items = "".join(
                f"<li class='{'optimal' if result.is_optimal(i) else ''}'>{html.escape(calc)}</li>"
                for i, calc in enumerate(result.calculations)
            )
            criteria_html.append(
                f"<div class='criterion'><h3>{html.escape(result.name)}</h3>"
                f"<p>{html.escape(result.description)}</p><ul>{items}</ul>"
                f"<p><strong>Optimal:</strong> {chosen}</p></div>"
            )

        header_cells = "".join(f"<th>{html.escape(title)}</th>" for _, title in self.comparison.columns)
        body_rows = []
        for row in self.comparison.rows:
            cells = "".join(
                f"<td class='optimal'>{row.scores[key]:.{self.precision}f} ✓</td>"
                if key in row.selected_by
                else f"<td>{row.scores[key]:.{self.precision}f}</td>"
                for key, _ in self.comparison.columns
            )
            body_rows.append(f"<tr><td>{html.escape(row.alternative.name)}</td>{cells}</tr>")

        criteria_block = "".join(criteria_html)
        comparison_rows = "".join(body_rows)

        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Decision Analysis Report</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
               max-width: 900px; margin: 0 auto; padding: 20px; color: #1f2937; }}
        h2 {{ border-bottom: 1px solid #d1d5db; padding-bottom: 8px; }}
        table {{ border-collapse: collapse; margin-bottom: 16px; }}
        th, td {{ padding: 6px 12px; text-align: right; border: 1px solid #d1d5db; }}
        th:first-child, td:first-child {{ text-align: left; }}
        .optimal {{ background: #dcfce7; font-weight: bold; color: #166534; }}
        .criterion {{ background: #f9fafb; padding: 12px 16px; border-radius: 6px; margin: 12px 0; }}
        .criterion ul {{ font-family: monospace; }}
    </style>
</head>
<body>
    <h1>{html.escape(self._title())}</h1>
    <h2>Payoff Matrix</h2>
    {_html_grid(m, m.values)}
    <h2>Regret Matrix</h2>
    {_html_grid(m, self.results.regret_matrix)}
    <h2>Criteria</h2>
    {criteria_block}
    <h2>Comparison</h2>
    <table>
        <tr><th>Alternative</th>{header_cells}</tr>
        {comparison_rows}
    </table>
</body>
</html>
"""

    def save(self, filepath: str, format: Optional[ReportFormat] = None) -> None:
        """
        Save report to file.

        Args:
            filepath: Output file path
            format: Format (inferred from extension if not specified)
        """
        if format is None:
            format = ReportFormat.from_path(filepath)

        content = self.generate(format)

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(content)


def _text_grid(matrix, grid: Sequence[Sequence[float]]) -> str:
    names = [a.name for a in matrix.alternatives]
    headers = [s.name for s in matrix.states]
    cells = [[format_entry(v) for v in row] for row in grid]

    name_width = max(len(n) for n in names)
    widths = [
        max(len(h), *(len(row[j]) for row in cells))
        for j, h in enumerate(headers)
    ]

    lines = [" " * name_width + "".join(f"  {h:>{w}}" for h, w in zip(headers, widths))]
    for name, row in zip(names, cells):
        lines.append(name.ljust(name_width) + "".join(f"  {c:>{w}}" for c, w in zip(row, widths)))
    return "\n".join(lines)


def _markdown_grid(matrix, grid: Sequence[Sequence[float]]) -> List[str]:
    lines = [
        "| | " + " | ".join(s.name for s in matrix.states) + " |",
        "|---" * (matrix.n_states + 1) + "|",
    ]
    for alt, row in zip(matrix.alternatives, grid):
        lines.append(f"| {alt.name} | " + " | ".join(format_entry(v) for v in row) + " |")
    return lines


def _html_grid(matrix, grid: Sequence[Sequence[float]]) -> str:
    header = "".join(f"<th>{html.escape(s.name)}</th>" for s in matrix.states)
    rows = "".join(
        f"<tr><td>{html.escape(alt.name)}</td>"
        + "".join(f"<td>{format_entry(v)}</td>" for v in row)
        + "</tr>"
        for alt, row in zip(matrix.alternatives, grid)
    )
    return f"<table><tr><th></th>{header}</tr>{rows}</table>"
