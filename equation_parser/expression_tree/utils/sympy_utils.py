import sympy as sp
from typing import Union

from ..core.node import Node


def to_sympy(equation_or_node: Union['Equation', Node]) -> sp.Expr:
  """Unevaluated SymPy expression with the same tree shape"""
  root = getattr(equation_or_node, 'root', equation_or_node)
  return root.to_sympy()
