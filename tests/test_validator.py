"""Tests for the structural tree validator."""

import pytest

from equation_parser import (
    EquationValidator, MalformedTreeError, Operator, OperatorNode, ValueNode, parse
)
import equation_parser.builder as builder_module


@pytest.mark.parametrize("text", ["1", "1+2", "2*3+4*5+6", "1+2*3-4/2", "8/2/2/2"])
def test_parsed_trees_are_valid(text):
    equation = parse(text, validate=True)
    assert EquationValidator.validate(equation.root) == []
    assert EquationValidator.is_valid(equation.root)


def test_missing_operand():
    node = OperatorNode(Operator.ADD)
    node.set_left(ValueNode(1))
    violations = EquationValidator.validate(node)
    assert len(violations) == 1
    assert "missing its right operand" in violations[0]


def test_inconsistent_parent_link():
    node = OperatorNode(Operator.MUL)
    node.set_left(ValueNode(2))
    node.right = ValueNode(3)
    violations = EquationValidator.validate(node)
    assert any("does not point back" in v for v in violations)


def test_root_with_parent():
    outer = OperatorNode(Operator.SUB)
    inner = OperatorNode(Operator.ADD)
    inner.set_left(ValueNode(1))
    inner.set_right(ValueNode(2))
    outer.set_left(inner)
    outer.set_right(ValueNode(3))
    assert not EquationValidator.is_valid(inner)
    assert EquationValidator.is_valid(outer)


def test_shared_node():
    leaf = ValueNode(4)
    node = OperatorNode(Operator.DIV)
    node.set_left(leaf)
    node.set_right(leaf)
    violations = EquationValidator.validate(node)
    assert any("more than once" in v for v in violations)


def test_missing_root():
    assert EquationValidator.validate(None) == ["tree has no root"]


def test_parse_rejects_malformed_tree(monkeypatch):
    monkeypatch.setattr(
        builder_module.EquationValidator, "validate",
        staticmethod(lambda root: ["forced violation"]))
    with pytest.raises(MalformedTreeError) as excinfo:
        parse("1+2", validate=True)
    assert excinfo.value.violations == ["forced violation"]


def test_error_classes_are_documented():
    from equation_parser import errors
    for name in ("EquationError", "NumberFormatError", "InvalidOperatorError",
                 "IncompleteExpressionError", "MalformedTreeError", "BuilderFinalizedError"):
        assert getattr(errors, name).__doc__
