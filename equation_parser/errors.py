"""Exceptions raised while turning an expression string into an Equation."""

from typing import Optional


class EquationError(ValueError):
  """Base class for every parse failure"""

  def __init__(self, message: str, token: Optional[str] = None, position: Optional[int] = None):
    super().__init__(message)
    self.token = token
    self.position = position


class NumberFormatError(EquationError):
  """A token in value position is not a decimal literal"""


class InvalidOperatorError(EquationError):
  """A token in operator position is not in the operator table"""


class IncompleteExpressionError(EquationError):
  """Input ended while the builder still expected a value"""


class MalformedTreeError(EquationError):
  """The finished tree breaks a structural invariant"""

  def __init__(self, violations):
    super().__init__("Malformed expression tree: " + "; ".join(violations))
    self.violations = list(violations)


class BuilderFinalizedError(RuntimeError):
  """Tokens were fed to a builder after build()"""
