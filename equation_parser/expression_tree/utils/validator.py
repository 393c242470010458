from typing import List
from ..core.node import Node, ValueNode, OperatorNode


class EquationValidator:
  """Checks the structural invariants of a finished expression tree"""

  @staticmethod
  def is_valid(root: Node) -> bool:
    return not EquationValidator.validate(root)

  @staticmethod
  def validate(root: Node) -> List[str]:
    violations = []

    if root is None:
      return ["tree has no root"]

    if root.parent is not None:
      violations.append(f"root {root!r} has a parent")

    seen = set()
    stack = [root]
    while stack:
      node = stack.pop()
      if id(node) in seen:
        violations.append(f"{node!r} is reachable more than once")
        continue
      seen.add(id(node))

      if isinstance(node, ValueNode):
        continue

      if not isinstance(node, OperatorNode):
        violations.append(f"unexpected node type {type(node).__name__}")
        continue

      for side in ('left', 'right'):
        child = getattr(node, side)
        if child is None:
          violations.append(f"{node!r} is missing its {side} operand")
          continue
        if child.parent is not node:
          violations.append(f"{side} child {child!r} of {node!r} does not point back to it")
        stack.append(child)

    return violations
