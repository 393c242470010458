# Python

"""Equation Parser Package

Parses flat infix arithmetic into a precedence-respecting expression tree and
evaluates it.
"""

from .expression_tree import (
  Equation, Node, ValueNode, OperatorNode,
  NodeType, OpType, Operator, lookup, apply,
  EquationValidator, to_sympy
)
from .tokenizer import tokenize, VALUE_PATTERN
from .builder import EquationBuilder, BuilderState, parse
from .evaluator import evaluate, evaluate_iterative
from .errors import (
  EquationError, NumberFormatError, InvalidOperatorError,
  IncompleteExpressionError, MalformedTreeError, BuilderFinalizedError
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Equation", "Node", "ValueNode", "OperatorNode",
  "NodeType", "OpType", "Operator", "lookup", "apply",
  "EquationValidator", "to_sympy",
  "tokenize", "VALUE_PATTERN",
  "EquationBuilder", "BuilderState", "parse",
  "evaluate", "evaluate_iterative",
  "EquationError", "NumberFormatError", "InvalidOperatorError",
  "IncompleteExpressionError", "MalformedTreeError", "BuilderFinalizedError",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
