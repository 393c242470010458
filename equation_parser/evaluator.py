"""Reduces a finished expression tree to a single float."""

import numpy as np
from typing import Union

from .expression_tree.core.node import Node, ValueNode
from .expression_tree.expression import Equation
from .logging_system import LogLevel, log_info


def _root_of(equation_or_node: Union[Equation, Node]) -> Node:
  if isinstance(equation_or_node, Equation):
    return equation_or_node.root
  return equation_or_node


def _report_non_finite(result: float) -> float:
  if not np.isfinite(result):
    log_info(f"Evaluation produced non-finite result {result}", LogLevel.DETAILED)
  return result


def evaluate(equation_or_node: Union[Equation, Node]) -> float:
  """Left operand, then right, then the operator; safe for any tree depth"""
  return evaluate_iterative(equation_or_node)


def evaluate_iterative(equation_or_node: Union[Equation, Node]) -> float:
  """
  Explicit-stack post-order evaluation.

  Matches the recursive ``Node.evaluate`` without its depth limit, for very
  long chains such as ``1-1-1-...`` whose trees grow one level per operator.
  """
  values = []
  stack = [(_root_of(equation_or_node), False)]

  while stack:
    node, expanded = stack.pop()
    if isinstance(node, ValueNode):
      values.append(node.value)
    elif expanded:
      rhs = values.pop()
      lhs = values.pop()
      values.append(node.operator.apply(lhs, rhs))
    else:
      stack.append((node, True))
      stack.append((node.right, False))
      stack.append((node.left, False))

  return _report_non_finite(values.pop())
