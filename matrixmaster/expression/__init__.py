"""
Expression package.

Immutable expression trees built by the symbolic evaluator, and the visitors
that render them (plain text, TeX) or convert them (SymPy).
"""

from .ast import BinaryOp, Expression, Group, Literal, Negate, Sum, Symbol, Term
from .context import RenderSettings
from .visitors import StringVisitor, SympyVisitor, TeXVisitor, render, to_sympy

__all__ = [
    "Expression",
    "Term",
    "Literal",
    "Symbol",
    "BinaryOp",
    "Negate",
    "Group",
    "Sum",
    "RenderSettings",
    "StringVisitor",
    "TeXVisitor",
    "SympyVisitor",
    "render",
    "to_sympy",
]
