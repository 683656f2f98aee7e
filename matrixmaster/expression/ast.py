"""
Expression tree node definitions.

Terms (``Literal`` and ``Symbol``) are the opaque atoms supplied by the caller.
Composite nodes (``BinaryOp``, ``Negate``, ``Group``, ``Sum``) are only ever
built by the symbolic evaluator. Every node is immutable and compares
structurally, so two render-identical trees are equal.

Rendering is kept out of the nodes: each node accepts a visitor (string, TeX,
SymPy conversion) following the Visitor pattern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol


class ExpressionVisitor(Protocol):
    """
    Visitor protocol for traversing expression trees.

    Implementations provide plain-text rendering, TeX rendering, conversion, etc.
    """

    def visit_literal(self, node: "Literal") -> Any:
        ...

    def visit_symbol(self, node: "Symbol") -> Any:
        ...

    def visit_binary_op(self, node: "BinaryOp") -> Any:
        ...

    def visit_negate(self, node: "Negate") -> Any:
        ...

    def visit_group(self, node: "Group") -> Any:
        ...

    def visit_sum(self, node: "Sum") -> Any:
        ...


class Expression(ABC):
    """
    Base class for all expression nodes.

    Uses the Visitor pattern to allow multiple operations (string, TeX, SymPy)
    without modifying node classes.
    """

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor) -> Any:
        """Accept a visitor for traversal."""
        pass

    def __str__(self) -> str:
        from .visitors import StringVisitor

        return self.accept(StringVisitor())


# Leaf Nodes (terms)


@dataclass(frozen=True, eq=True)
class Literal(Expression):
    """
    A finite real literal, kept exactly as the caller typed it.

    Examples: 0, 1.5, -2, 1e-3

    Equality is by token text, so ``Literal("1") != Literal("1.0")``.
    """

    text: str

    @property
    def value(self) -> float:
        return float(self.text)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_literal(self)


@dataclass(frozen=True, eq=True)
class Symbol(Expression):
    """
    Any non-numeric token.

    Examples: x, a11, theta, λ
    """

    name: str

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_symbol(self)


Term = Literal | Symbol


# Composite Nodes


@dataclass(frozen=True, eq=True)
class BinaryOp(Expression):
    """
    A binary operation.

    Operators: +, -, *
    """

    left: Expression
    op: str
    right: Expression

    OPERATORS = ("+", "-", "*")

    def __post_init__(self) -> None:
        if self.op not in self.OPERATORS:
            raise ValueError(f"Unsupported operator: {self.op!r}")

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_binary_op(self)


@dataclass(frozen=True, eq=True)
class Negate(Expression):
    """Leading negation, e.g. the sign of an odd cofactor."""

    operand: Expression

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_negate(self)


@dataclass(frozen=True, eq=True)
class Group(Expression):
    """Explicit parenthesization of a sub-expression."""

    inner: Expression

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_group(self)


@dataclass(frozen=True, eq=True)
class Sum(Expression):
    """
    Flat, unsimplified sum of terms.

    Examples: x+x, a+e+i
    """

    terms: tuple[Expression, ...]

    def __post_init__(self) -> None:
        if len(self.terms) < 2:
            raise ValueError("Sum needs at least two terms")

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_sum(self)
