"""
MatrixMaster command-line tool.

Usage:
    python -m matrixmaster <operation> <matrix> [options]

The matrix is written row by row: rows separated by ';', entries by ','.

Options:
    --symbol S      Eigenvalue symbol for charpoly (default: λ)
    --precision N   Significant digits for numeric results
    --tex           Render LaTeX instead of plain text
    --expand        Also print the SymPy-expanded symbolic result
    --solve B       Solve Ax = b for the comma-separated vector B

Example:
    python -m matrixmaster det "a,b,c;d,e,f;g,h,i"
    python -m matrixmaster inv "x,1;0,x" --tex
    python -m matrixmaster det "a,b;c,d" --expand
    python -m matrixmaster solve "2,1;1,3" --solve "3,5"
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from matrixmaster.core.config import get_settings
from matrixmaster.core.logging import get_logger, setup_logging
from matrixmaster.display import format_number, format_result, format_title
from matrixmaster.dispatch import Operation, evaluate
from matrixmaster.errors import MatrixError
from matrixmaster.expression.context import RenderSettings
from matrixmaster.linalg import numeric
from matrixmaster.linalg.matrix import Matrix

logger = get_logger(__name__)


def parse_grid(text: str) -> list[list[str]]:
    """Split "a,b;c,d" into rows of raw tokens (empty cells are kept)."""
    return [row.split(",") for row in text.split(";")]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrixmaster",
        description="Numeric and symbolic matrix calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "operation",
        choices=[op.value for op in Operation] + ["solve"],
        help="Operation to perform",
    )
    parser.add_argument("matrix", help='Matrix rows separated by ";", entries by ","')
    parser.add_argument("--symbol", default=None, help="Eigenvalue symbol for charpoly")
    parser.add_argument("--precision", type=int, default=None, help="Significant digits for numbers")
    parser.add_argument("--tex", action="store_true", help="Render LaTeX output")
    parser.add_argument("--expand", action="store_true", help="Append an expanded preview of symbolic results")
    parser.add_argument("--solve", dest="vector", default=None, help="Right-hand side b for solve")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)
    render_settings = RenderSettings(
        precision=args.precision or settings.PRECISION,
        locale=settings.LOCALE,
        tex=args.tex,
        expand=args.expand,
    )

    try:
        matrix = Matrix.from_tokens(parse_grid(args.matrix), name="Matrix A")

        if args.operation == "solve":
            if args.vector is None:
                parser.error("solve requires --solve B")
            solution = numeric.solve(matrix, args.vector.split(","))
            print("Solution Vector x")
            for value in solution:
                print(format_number(value, render_settings.precision))
            return 0

        result = evaluate(args.operation, matrix, symbol=args.symbol, settings=settings)
    except MatrixError as exc:
        logger.debug("Calculation failed: %s", exc.message)
        print(f"{render_settings.labels.error}: {exc.message}", file=sys.stderr)
        return 1

    print(format_title(result, render_settings))
    print(format_result(result, render_settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
