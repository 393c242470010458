"""
Tree Utility Functions

Traversal and shape helpers shared by the validator, the evaluator and the
tests.
"""

from typing import List

from ..core.node import Node, ValueNode, OperatorNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _children(node: Node) -> List[Node]:
    if isinstance(node, OperatorNode):
        return [child for child in (node.left, node.right) if child is not None]
    return []


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(_children(current_node)))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    depth = 0
    level = [node]
    while level:
        depth += 1
        level = [child for current in level for child in _children(current)]
    return depth


def get_operator_nodes(node: Node) -> List[OperatorNode]:
    """All operator nodes in depth-first order"""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, OperatorNode)]


def get_value_nodes(node: Node) -> List[ValueNode]:
    """All leaves in depth-first order, which is source order"""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, ValueNode)]


def is_on_right_spine(node: Node) -> bool:
    """True if ``node`` is reached from the root by following only right links."""
    current = node
    parent = current.parent
    while parent is not None:
        if parent.right is not current:
            return False
        current = parent
        parent = current.parent
    return True


def count_nodes(node: Node) -> int:
    """Node count without recursion"""
    return len(get_all_nodes(node, 'depth_first'))


def render_infix(node: Node) -> str:
    """
    Fully parenthesised infix string, built post-order with an explicit stack.

    Args:
        node: Root node of the tree

    Returns:
        String such as '((10 - 2) - 3)'
    """
    parts = []
    stack = [(node, False)]

    while stack:
        current_node, expanded = stack.pop()
        if isinstance(current_node, ValueNode):
            parts.append(f"{current_node.value:g}")
        elif expanded:
            right = parts.pop()
            left = parts.pop()
            parts.append(f"({left} {current_node.operator.symbol} {right})")
        else:
            stack.append((current_node, True))
            stack.append((current_node.right, False))
            stack.append((current_node.left, False))

    return parts.pop()
