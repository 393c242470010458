"""Core expression tree components."""

from .node import Node, ValueNode, OperatorNode
from .operators import (
    NodeType, OpType, Operator, BINARY_OP_MAP, PRECEDENCE,
    lookup, apply, evaluate_binary_op_fast
)

__all__ = [
    'Node', 'ValueNode', 'OperatorNode',
    'NodeType', 'OpType', 'Operator', 'BINARY_OP_MAP', 'PRECEDENCE',
    'lookup', 'apply', 'evaluate_binary_op_fast'
]
