"""Tests for the operator table."""

import numpy as np
import pytest

from equation_parser import Operator, OpType, lookup, apply
from equation_parser.expression_tree import BINARY_OP_MAP, PRECEDENCE


@pytest.mark.parametrize("symbol, operator", [
    ("+", Operator.ADD),
    ("-", Operator.SUB),
    ("*", Operator.MUL),
    ("/", Operator.DIV),
])
def test_lookup(symbol, operator):
    assert lookup(symbol) is operator
    assert operator.symbol == symbol


@pytest.mark.parametrize("symbol", ["%", "^", "", "++", "plus", "1"])
def test_lookup_unknown(symbol):
    assert lookup(symbol) is None


def test_precedence_ranks():
    assert Operator.ADD.precedence == Operator.SUB.precedence == 0
    assert Operator.MUL.precedence == Operator.DIV.precedence == 1


def test_tables_cover_every_operator():
    assert set(BINARY_OP_MAP) == {op.symbol for op in Operator}
    assert set(PRECEDENCE) == set(OpType)
    assert Operator.DIV.op_type == OpType.DIV


@pytest.mark.parametrize("operator, lhs, rhs, expected", [
    (Operator.ADD, 1.0, 2.0, 3.0),
    (Operator.SUB, 10.0, 2.5, 7.5),
    (Operator.MUL, 3.0, 4.0, 12.0),
    (Operator.DIV, 15.0, 4.0, 3.75),
])
def test_apply(operator, lhs, rhs, expected):
    assert apply(operator, lhs, rhs) == pytest.approx(expected)
    assert operator.apply(lhs, rhs) == pytest.approx(expected)


def test_apply_accepts_ints():
    assert apply(Operator.DIV, 7, 2) == 3.5


def test_division_by_zero_follows_ieee754():
    assert apply(Operator.DIV, 1.0, 0.0) == np.inf
    assert apply(Operator.DIV, -1.0, 0.0) == -np.inf
    assert np.isnan(apply(Operator.DIV, 0.0, 0.0))
