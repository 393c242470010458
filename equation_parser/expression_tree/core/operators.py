import numba
from enum import Enum, IntEnum
from typing import Optional


class NodeType(IntEnum):
  VALUE = 0
  OPERATOR = 1


class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3


# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}

# Higher binds tighter
PRECEDENCE = {OpType.ADD: 0, OpType.SUB: 0, OpType.MUL: 1, OpType.DIV: 1}


class Operator(Enum):
  """The fixed set of binary operators"""

  ADD = '+'
  SUB = '-'
  MUL = '*'
  DIV = '/'

  @property
  def symbol(self) -> str:
    return self.value

  @property
  def op_type(self) -> OpType:
    return BINARY_OP_MAP[self.value]

  @property
  def precedence(self) -> int:
    return PRECEDENCE[self.op_type]

  def apply(self, lhs: float, rhs: float) -> float:
    return evaluate_binary_op_fast(float(lhs), float(rhs), int(self.op_type))


def lookup(symbol: str) -> Optional[Operator]:
  """Return the operator spelled ``symbol``, or None"""
  if symbol in BINARY_OP_MAP:
    return Operator(symbol)
  return None


def apply(op: Operator, lhs: float, rhs: float) -> float:
  return op.apply(lhs, rhs)


# error_model='numpy' keeps IEEE-754 semantics: x/0 gives inf or nan, never raises
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_fast(lhs, rhs, op_type):
  if op_type == OpType.ADD:
    return lhs + rhs
  elif op_type == OpType.SUB:
    return lhs - rhs
  elif op_type == OpType.MUL:
    return lhs * rhs
  elif op_type == OpType.DIV:
    return lhs / rhs
  return 0.0
