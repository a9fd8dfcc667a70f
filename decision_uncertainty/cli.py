"""
CLI entry point for decision analysis under uncertainty.
"""

import argparse
import json
import logging
import sys

from decision_uncertainty.engine.evaluator import DecisionEngine, EngineConfig
from decision_uncertainty.engine.matrix import PayoffMatrix
from decision_uncertainty.errors import DecisionError, UnknownExampleError
from decision_uncertainty.examples.matrices import get_example, list_examples
from decision_uncertainty.output.reporter import Reporter, ReportFormat

logger = logging.getLogger(__name__)

FORMATS = {
    "text": ReportFormat.TEXT,
    "json": ReportFormat.JSON,
    "markdown": ReportFormat.MARKDOWN,
    "html": ReportFormat.HTML,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decision rules under uncertainty - Laplace, Maximax, Maximin, Hurwicz, Savage"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate a payoff matrix from a JSON file")
    eval_parser.add_argument("matrix", help="Path to a JSON payoff matrix")
    _add_evaluation_options(eval_parser)
    eval_parser.add_argument(
        "--cost",
        action="store_true",
        help="Treat entries as costs to minimise (overrides the file's is_cost)"
    )

    # Example command
    example_parser = subparsers.add_parser("example", help="Evaluate a built-in example matrix")
    example_parser.add_argument("name", help="Example name (see 'examples')")
    _add_evaluation_options(example_parser)

    # Examples command
    subparsers.add_parser("examples", help="List built-in example matrices")

    return parser


def _add_evaluation_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-a", "--alpha",
        type=float,
        default=0.5,
        help="Hurwicz optimism coefficient in [0, 1] (default: 0.5)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file for report (format inferred from extension)"
    )
    parser.add_argument(
        "-f", "--format",
        choices=sorted(FORMATS),
        help="Report format (default: inferred from --output, else text)"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=2,
        help="Decimals shown for derived scores (default: 2)"
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.command == "evaluate":
            run_evaluation(args, load_matrix(args.matrix, force_cost=args.cost))
        elif args.command == "example":
            run_evaluation(args, get_example(args.name))
        elif args.command == "examples":
            for name in list_examples():
                m = get_example(name)
                print(f"{name}: {m.n_alternatives} alternatives x {m.n_states} states ({m.orientation})")
        else:
            parser.print_help()
    except (DecisionError, UnknownExampleError) as e:
        message = e.args[0] if e.args else str(e)
        print(f"error: {message}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


def load_matrix(path: str, force_cost: bool = False) -> PayoffMatrix:
    """Read a payoff matrix from a JSON file."""
    logger.debug("Loading matrix from %s", path)
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DecisionError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecisionError(f"{path} must contain a JSON object")

    matrix = PayoffMatrix.from_dict(data)
    if force_cost:
        matrix = matrix.with_orientation(True)
    return matrix


def run_evaluation(args, matrix: PayoffMatrix) -> None:
    """Evaluate a matrix and print or save the report."""
    engine = DecisionEngine(EngineConfig(alpha=args.alpha, precision=args.precision))
    results = engine.evaluate(matrix)
    reporter = Reporter(results, precision=args.precision)

    format = FORMATS[args.format] if args.format else None

    if args.output:
        reporter.save(args.output, format)
        print(f"Report saved to: {args.output}")
    else:
        print(reporter.generate(format or ReportFormat.TEXT))


if __name__ == "__main__":
    sys.exit(main())
