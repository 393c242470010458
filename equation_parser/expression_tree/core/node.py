import weakref
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional
from .operators import NodeType, Operator


class Node(ABC):
  """Base node class with a weak, navigation-only parent link"""

  __slots__ = ('_parent', '__weakref__')

  def __init__(self):
    self._parent: Optional[weakref.ref] = None

  @property
  def parent(self) -> Optional['OperatorNode']:
    if self._parent is None:
      return None
    return self._parent()

  @parent.setter
  def parent(self, node: Optional['OperatorNode']):
    self._parent = None if node is None else weakref.ref(node)

  @property
  @abstractmethod
  def node_type(self) -> NodeType:
    pass

  @abstractmethod
  def evaluate(self) -> float:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def size(self) -> int:
    pass


class ValueNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  @property
  def node_type(self) -> NodeType:
    return NodeType.VALUE

  def evaluate(self) -> float:
    return self.value

  def to_string(self) -> str:
    return f"{self.value:g}"

  def to_sympy(self) -> sp.Expr:
    return sp.Float(self.value)

  def size(self) -> int:
    return 1

  def __repr__(self) -> str:
    return f"ValueNode({self.value!r})"


class OperatorNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: Operator):
    super().__init__()
    self.operator = operator
    self.left: Optional[Node] = None
    self.right: Optional[Node] = None

  @property
  def node_type(self) -> NodeType:
    return NodeType.OPERATOR

  @property
  def precedence(self) -> int:
    return self.operator.precedence

  def set_left(self, node: Node):
    self.left = node
    node.parent = self

  def set_right(self, node: Node):
    self.right = node
    node.parent = self

  def evaluate(self) -> float:
    left_val = self.left.evaluate()
    right_val = self.right.evaluate()
    return self.operator.apply(left_val, right_val)

  def to_string(self) -> str:
    from ..utils.tree_utils import render_infix
    return render_infix(self)

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator is Operator.ADD:
      return sp.Add(left, right, evaluate=False)
    elif self.operator is Operator.SUB:
      return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
    elif self.operator is Operator.MUL:
      return sp.Mul(left, right, evaluate=False)
    elif self.operator is Operator.DIV:
      return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
    raise RuntimeWarning(f"to_sympy reached unexpected operation at node {type(self)}")

  def size(self) -> int:
    from ..utils.tree_utils import count_nodes
    return count_nodes(self)

  def __repr__(self) -> str:
    return f"OperatorNode({self.operator.symbol!r})"
