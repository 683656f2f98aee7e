"""Tests for expression tree nodes."""

import dataclasses

import pytest

from matrixmaster.expression.ast import BinaryOp, Group, Literal, Negate, Sum, Symbol


class TestTerms:
    """Test the atomic Literal and Symbol terms."""

    def test_literal_equality_is_by_token_text(self):
        """Test that literals compare by their text, not their value."""
        assert Literal("1") == Literal("1")
        assert Literal("1") != Literal("1.0")

    def test_literal_value(self):
        """Test that a literal exposes its float value."""
        assert Literal("-2.5").value == -2.5
        assert Literal("1e3").value == 1000.0

    def test_symbol_equality(self):
        """Test symbols compare by name."""
        assert Symbol("x") == Symbol("x")
        assert Symbol("x") != Symbol("y")

    def test_literal_and_symbol_with_same_text_differ(self):
        """Test that the node type takes part in equality."""
        assert Literal("1") != Symbol("1")

    def test_terms_are_immutable(self):
        """Test that terms cannot be mutated after creation."""
        term = Symbol("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            term.name = "y"

    def test_terms_are_hashable(self):
        """Test that terms can be used in sets and as dict keys."""
        assert len({Symbol("x"), Symbol("x"), Literal("1")}) == 2


class TestCompositeNodes:
    """Test composite expression nodes."""

    def test_structural_equality(self):
        """Test that identically built trees are equal."""
        left = Group(BinaryOp(Group(Symbol("a")), "*", Group(Symbol("d"))))
        right = Group(BinaryOp(Group(Symbol("a")), "*", Group(Symbol("d"))))
        assert left == right
        assert hash(left) == hash(right)

    def test_operands_order_matters(self):
        """Test that swapping operands changes the tree."""
        a, b = Symbol("a"), Symbol("b")
        assert BinaryOp(a, "*", b) != BinaryOp(b, "*", a)

    def test_unsupported_operator_rejected(self):
        """Test that only +, - and * are accepted."""
        with pytest.raises(ValueError):
            BinaryOp(Symbol("a"), "/", Symbol("b"))

    def test_sum_requires_two_terms(self):
        """Test that a Sum of a single term is rejected."""
        with pytest.raises(ValueError):
            Sum((Symbol("x"),))

    def test_negate_and_group_differ(self):
        """Test that a negated group differs from the bare group."""
        inner = Group(Symbol("c"))
        assert Negate(inner) != inner

    def test_str_uses_plain_text_rendering(self):
        """Test that str() renders through the plain-text visitor."""
        expr = Negate(Group(Symbol("b")))
        assert str(expr) == "-(b)"
