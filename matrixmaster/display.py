"""
Result formatting for display.

Turns a ``CalculationResult`` into user-visible text or LaTeX. All formatting
options come from an explicit ``RenderSettings`` value.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
import sympy as sp

from matrixmaster.dispatch import CalculationResult
from matrixmaster.expression.ast import Expression
from matrixmaster.expression.context import RenderSettings
from matrixmaster.expression.visitors import StringVisitor, TeXVisitor, to_sympy
from matrixmaster.linalg.matrix import Matrix
from matrixmaster.linalg.numeric import EigenResult, LUResult, QRResult
from matrixmaster.linalg.symbolic import SymbolicInverse


def format_number(value: Any, precision: int) -> str:
    """Format a real or complex number with ``precision`` significant digits."""
    if isinstance(value, (complex, np.complexfloating)):
        if value.imag == 0:
            return format_number(value.real, precision)
        real = format_number(value.real, precision)
        imag = format_number(abs(value.imag), precision)
        sign = "-" if value.imag < 0 else "+"
        return f"{real} {sign} {imag}i"

    number = float(value)
    if number == 0:
        # Avoid "-0"
        number = 0.0
    return f"{number:.{precision}g}"


def _array_rows(array: np.ndarray, precision: int) -> list[list[str]]:
    if array.ndim == 1:
        return [[format_number(v, precision)] for v in array]
    return [[format_number(v, precision) for v in row] for row in array]


def _text_grid(rows: list[list[str]]) -> str:
    if not rows:
        return "[]"
    widths = [max(len(row[j]) for row in rows) for j in range(len(rows[0]))]
    lines = []
    for row in rows:
        cells = "  ".join(cell.rjust(width) for cell, width in zip(row, widths))
        lines.append(f"[ {cells} ]")
    return "\n".join(lines)


def _tex_grid(rows: list[list[str]]) -> str:
    rows_tex = " \\\\ ".join(" & ".join(row) for row in rows)
    return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"


class ResultFormatter:
    """Formats values produced by the dispatcher, as text or TeX."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings or RenderSettings()
        if self.settings.tex:
            self.visitor: Any = TeXVisitor(self.settings)
            self.grid = _tex_grid
        else:
            self.visitor = StringVisitor()
            self.grid = _text_grid

    def expression(self, node: Expression) -> str:
        return node.accept(self.visitor)

    def matrix(self, matrix: Matrix) -> str:
        return self.grid([[self.expression(cell) for cell in row] for row in matrix.rows])

    def array(self, array: np.ndarray) -> str:
        return self.grid(_array_rows(np.atleast_1d(array), self.settings.precision))

    def expanded(self, node: Expression) -> str:
        """Preview line with the SymPy expansion of ``node``."""
        value = sp.expand(to_sympy(node))
        text = sp.latex(value) if self.settings.tex else str(value)
        return f"{self.settings.labels.expanded}: {text}"

    def format(self, value: Any) -> str:
        text = self._format(value)
        if self.settings.expand:
            if isinstance(value, Expression):
                return f"{text}\n{self.expanded(value)}"
            if isinstance(value, SymbolicInverse):
                return f"{text}\n{self.expanded(value.determinant)}"
        return text

    def _format(self, value: Any) -> str:
        precision = self.settings.precision

        if isinstance(value, Expression):
            return self.expression(value)
        if isinstance(value, Matrix):
            return self.matrix(value)
        if isinstance(value, SymbolicInverse):
            determinant = self.expression(value.determinant)
            if self.settings.tex:
                return f"\\frac{{1}}{{{determinant}}} {self.matrix(value.adjugate)}"
            return f"1 / {determinant}\n{self.matrix(value.adjugate)}"
        if isinstance(value, EigenResult):
            values = ", ".join(format_number(v, precision) for v in value.values)
            return f"values: [{values}]\nvectors:\n{self.array(value.vectors)}"
        if isinstance(value, LUResult):
            return "\n".join(
                f"{name}:\n{self.array(part)}"
                for name, part in (("L", value.L), ("U", value.U), ("P", value.P))
            )
        if isinstance(value, QRResult):
            return f"Q:\n{self.array(value.Q)}\nR:\n{self.array(value.R)}"
        if isinstance(value, np.ndarray):
            return self.array(value)
        if isinstance(value, (int, np.integer)):
            return str(int(value))
        if isinstance(value, (float, complex, np.floating, np.complexfloating)):
            return format_number(value, precision)
        raise TypeError(f"Cannot format value of type {type(value).__name__}")


def format_title(result: CalculationResult, settings: Optional[RenderSettings] = None, name: str = "A") -> str:
    """Title line, e.g. ``Result: det(A)``."""
    settings = settings or RenderSettings()
    return f"{settings.labels.result}: {result.operation.value}({name})"


def format_result(result: CalculationResult, settings: Optional[RenderSettings] = None) -> str:
    """Render a dispatcher result as plain text (or TeX when ``settings.tex``)."""
    return ResultFormatter(settings).format(result.value)
