"""
Incremental Equation Builder

Consumes tokens left to right and grows the expression tree in place. Each
new operator node is spliced into the existing tree: it either displaces a
pending operator node of equal or higher precedence (taking its place and
adopting it as the left operand), or it takes the place of the value that was
just completed.
"""

from enum import IntEnum
from typing import List, Optional

from .errors import (
  NumberFormatError, InvalidOperatorError, IncompleteExpressionError,
  MalformedTreeError, BuilderFinalizedError
)
from .expression_tree.core.node import Node, ValueNode, OperatorNode
from .expression_tree.core.operators import Operator, lookup
from .expression_tree.expression import Equation
from .expression_tree.utils.tree_utils import is_on_right_spine
from .expression_tree.utils.validator import EquationValidator
from .logging_system import get_logger, log_debug
from .tokenizer import VALUE_PATTERN, tokenize


class BuilderState(IntEnum):
  EXPECT_VALUE = 0
  EXPECT_OPERATOR = 1


class EquationBuilder:
  """Two-state machine that builds one Equation from a token stream"""

  def __init__(self):
    self.state = BuilderState.EXPECT_VALUE
    self.finalized = False
    self.head: Optional[Node] = None
    self.prev: Optional[Node] = None
    self.history: List[OperatorNode] = []
    self._position = 0
    self.logger = get_logger()

  def add(self, token: str) -> 'EquationBuilder':
    if self.finalized:
      raise BuilderFinalizedError("Cannot add tokens to a finalized builder")

    if self.state == BuilderState.EXPECT_VALUE:
      self._value(self._parse_number(token))
      self.state = BuilderState.EXPECT_OPERATOR
    else:
      operator = lookup(token)
      if operator is None:
        raise InvalidOperatorError(
          f"{token!r} is not a valid operator", token=token, position=self._position)
      self._operator(operator)
      self.state = BuilderState.EXPECT_VALUE

    self._position += 1
    return self

  def build(self) -> Equation:
    if self.finalized:
      raise BuilderFinalizedError("Builder has already been finalized")
    if self.state == BuilderState.EXPECT_VALUE:
      if self.head is None:
        raise IncompleteExpressionError("Expression is empty", position=self._position)
      raise IncompleteExpressionError(
        f"Expression ends with operator {self.prev.operator.symbol!r}",
        token=self.prev.operator.symbol, position=self._position - 1)

    self.finalized = True
    return Equation(self.head)

  def _parse_number(self, token: str) -> float:
    if VALUE_PATTERN.fullmatch(token) is None:
      raise NumberFormatError(
        f"{token!r} is not a number", token=token, position=self._position)
    try:
      return float(token)
    except ValueError:
      # digits and points but not a literal, e.g. '1.2.3' or '.'
      raise NumberFormatError(
        f"{token!r} is not a number", token=token, position=self._position) from None

  def _value(self, value: float):
    node = ValueNode(value)

    if self.head is None:
      self.head = node
    else:
      self.prev.set_right(node)

    self.prev = node

  def _operator(self, operator: Operator):
    node = OperatorNode(operator)

    if self.head is self.prev:
      # first operator: the lone value becomes its left operand
      node.set_left(self.head)
      self.head = node
    else:
      displaced = self._find_displaced(operator)

      if displaced is not None:
        parent = displaced.parent
        if parent is None:
          self.head = node
        else:
          parent.set_right(node)
        node.set_left(displaced)
        self.logger.debug(f"{operator.symbol} displaces {displaced.operator.symbol}")
      else:
        self.prev.parent.set_right(node)
        node.set_left(self.prev)
        self.logger.debug(f"{operator.symbol} extends the right branch")

    self.history.append(node)
    self.prev = node

  def _find_displaced(self, operator: Operator) -> Optional[OperatorNode]:
    """
    First pending node, oldest first, that binds at least as tightly.

    Pending nodes lie on the right spine; a node leaves the spine for good
    once it becomes a left child, so history order is top-down spine order.
    """
    for candidate in self.history:
      if candidate.precedence >= operator.precedence and is_on_right_spine(candidate):
        return candidate
    return None


def parse(text: str, validate: bool = False) -> Equation:
  """Build an Equation from ``text``; raises an EquationError subclass on bad input"""
  builder = EquationBuilder()
  try:
    for token in tokenize(text):
      builder.add(token)
    equation = builder.build()
  except (NumberFormatError, InvalidOperatorError, IncompleteExpressionError) as e:
    log_debug(f"Failed to parse {text!r}: {e}")
    raise

  if validate:
    violations = EquationValidator.validate(equation.root)
    if violations:
      log_debug(f"Rejected tree for {text!r}: {violations}")
      raise MalformedTreeError(violations)

  log_debug(f"Parsed {text!r} with {len(builder.history)} operators")
  return equation
