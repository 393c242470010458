"""Expression Tree Module

Node model, operator table and the Equation wrapper.
"""

from .expression import Equation
from .core.node import Node, ValueNode, OperatorNode
from .core.operators import (
    NodeType,
    OpType,
    Operator,
    BINARY_OP_MAP,
    PRECEDENCE,
    lookup,
    apply,
    evaluate_binary_op_fast
)
from .utils import EquationValidator, to_sympy

__all__ = [
    "Equation",
    "Node", "ValueNode", "OperatorNode",
    "NodeType", "OpType", "Operator",
    "BINARY_OP_MAP", "PRECEDENCE",
    "lookup", "apply", "evaluate_binary_op_fast",
    "EquationValidator", "to_sympy"
]
