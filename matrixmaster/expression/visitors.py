"""
Expression visitor implementations.

Visitors traverse and operate on expression trees:
- StringVisitor: Render to the plain-text display format
- TeXVisitor: Render to LaTeX
- SympyVisitor: Convert to a SymPy expression (preview and verification only)
"""

from __future__ import annotations

from typing import Any

import sympy as sp

from .ast import BinaryOp, Group, Literal, Negate, Sum, Symbol
from .context import RenderSettings


class StringVisitor:
    """
    Render an expression to plain text.

    Parenthesization is explicit in the tree (``Group``), so rendering is a
    direct, deterministic walk:

    - Group(BinaryOp(Group(a), '*', Group(d))) → "((a)*(d))"
    - BinaryOp(x, '-', y) → "x - y"
    - Sum([x, x]) → "x+x"
    """

    def visit_literal(self, node: Literal) -> str:
        return node.text

    def visit_symbol(self, node: Symbol) -> str:
        return node.name

    def visit_binary_op(self, node: BinaryOp) -> str:
        left_str = node.left.accept(self)
        right_str = node.right.accept(self)

        if node.op == "*":
            return f"{left_str}*{right_str}"
        return f"{left_str} {node.op} {right_str}"

    def visit_negate(self, node: Negate) -> str:
        return f"-{node.operand.accept(self)}"

    def visit_group(self, node: Group) -> str:
        return f"({node.inner.accept(self)})"

    def visit_sum(self, node: Sum) -> str:
        return "+".join(term.accept(self) for term in node.terms)


class TeXVisitor:
    """
    Render an expression to LaTeX.

    Examples:
    - BinaryOp(Group(a), '*', Group(d)) → "\\left(a\\right) \\cdot \\left(d\\right)"
    - Symbol('lambda') → "\\lambda"
    """

    GREEK = {
        "alpha": r"\alpha",
        "beta": r"\beta",
        "gamma": r"\gamma",
        "delta": r"\delta",
        "epsilon": r"\epsilon",
        "theta": r"\theta",
        "lambda": r"\lambda",
        "mu": r"\mu",
        "pi": r"\pi",
        "sigma": r"\sigma",
        "phi": r"\phi",
        "omega": r"\omega",
        "α": r"\alpha",
        "β": r"\beta",
        "γ": r"\gamma",
        "δ": r"\delta",
        "θ": r"\theta",
        "λ": r"\lambda",
        "μ": r"\mu",
        "σ": r"\sigma",
        "ω": r"\omega",
    }

    def __init__(self, settings: RenderSettings | None = None):
        self.settings = settings or RenderSettings()

    def visit_literal(self, node: Literal) -> str:
        return node.text

    def visit_symbol(self, node: Symbol) -> str:
        if node.name in self.settings.symbols:
            return self.settings.symbols[node.name]

        if node.name in self.GREEK:
            return self.GREEK[node.name]
        if node.name.lower() in self.GREEK:
            return self.GREEK[node.name.lower()]

        # Multi-character symbols
        if len(node.name) > 1:
            return f"\\mathrm{{{node.name}}}"

        return node.name

    def visit_binary_op(self, node: BinaryOp) -> str:
        left_str = node.left.accept(self)
        right_str = node.right.accept(self)

        if node.op == "*":
            return f"{left_str} \\cdot {right_str}"
        return f"{left_str} {node.op} {right_str}"

    def visit_negate(self, node: Negate) -> str:
        return f"-{node.operand.accept(self)}"

    def visit_group(self, node: Group) -> str:
        return f"\\left({node.inner.accept(self)}\\right)"

    def visit_sum(self, node: Sum) -> str:
        return " + ".join(term.accept(self) for term in node.terms)


class SympyVisitor:
    """
    Convert an expression to SymPy.

    Literals become exact rationals so that an expanded preview of an
    unsimplified determinant never picks up floating-point noise.
    """

    def __init__(self):
        self._symbols: dict[str, sp.Symbol] = {}

    def visit_literal(self, node: Literal) -> Any:
        return sp.Rational(node.text)

    def visit_symbol(self, node: Symbol) -> Any:
        if node.name not in self._symbols:
            self._symbols[node.name] = sp.Symbol(node.name)
        return self._symbols[node.name]

    def visit_binary_op(self, node: BinaryOp) -> Any:
        left = node.left.accept(self)
        right = node.right.accept(self)

        if node.op == "+":
            return left + right
        if node.op == "-":
            return left - right
        return left * right

    def visit_negate(self, node: Negate) -> Any:
        return -node.operand.accept(self)

    def visit_group(self, node: Group) -> Any:
        return node.inner.accept(self)

    def visit_sum(self, node: Sum) -> Any:
        return sp.Add(*(term.accept(self) for term in node.terms))


def render(expression: Any, settings: RenderSettings | None = None) -> str:
    """Render an expression as text or TeX, depending on ``settings.tex``."""
    settings = settings or RenderSettings()
    if settings.tex:
        return expression.accept(TeXVisitor(settings))
    return expression.accept(StringVisitor())


def to_sympy(expression: Any) -> Any:
    """Convert an expression to a SymPy expression."""
    return expression.accept(SympyVisitor())
