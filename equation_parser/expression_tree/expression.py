from typing import Optional
from .core.node import Node
import sympy as sp


class Equation:
  """A fully built, read-only expression tree"""

  __slots__ = ('_root', '_string_cache')

  def __init__(self, root: Node):
    self._root = root
    self._string_cache: Optional[str] = None

  @property
  def root(self) -> Node:
    return self._root

  @classmethod
  def parse(cls, text: str, validate: bool = False) -> 'Equation':
    from ..builder import parse
    return parse(text, validate=validate)

  def evaluate(self) -> float:
    from ..evaluator import evaluate
    return evaluate(self)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self._root.to_string()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self._root.size()

  def depth(self) -> int:
    from .utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self._root)

  def to_sympy(self) -> sp.Expr:
    return self._root.to_sympy()

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Equation({self.to_string()!r})"
