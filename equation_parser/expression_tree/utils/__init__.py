"""Utilities for expression trees."""

from .sympy_utils import to_sympy
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_operator_nodes,
    get_value_nodes, is_on_right_spine
)
from .validator import EquationValidator

__all__ = [
    'to_sympy',
    'get_all_nodes', 'calculate_tree_depth', 'get_operator_nodes',
    'get_value_nodes', 'is_on_right_spine',
    'EquationValidator'
]
