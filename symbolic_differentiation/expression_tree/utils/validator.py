import numpy as np
from typing import List, Optional
from ..core.node import Node
from ..environment import Environment
from ..errors import InvalidTreeError
from .tree_utils import get_variables
from ...logging_system import log_warning


class ExpressionValidator:

  @staticmethod
  def validate(node: Node):
    """Raise InvalidTreeError unless ``node`` is a finite, acyclic tree of Nodes"""
    if not isinstance(node, Node):
      raise InvalidTreeError(f"Expected a Node, got {type(node).__name__}")

    # Iterative DFS; a node already on the current path means a cycle
    on_path = set()
    finished = set()
    stack = [(node, False)]
    while stack:
      current, exiting = stack.pop()
      if exiting:
        on_path.discard(id(current))
        finished.add(id(current))
        continue
      if id(current) in on_path:
        raise InvalidTreeError(f"Cycle detected at {type(current).__name__}")
      if id(current) in finished:
        continue
      on_path.add(id(current))
      stack.append((current, True))
      for child in current.children():
        if not isinstance(child, Node):
          raise InvalidTreeError(f"{type(current).__name__} has non-Node operand {type(child).__name__}")
        if id(child) in on_path:
          raise InvalidTreeError(f"Cycle detected at {type(child).__name__}")
        stack.append((child, False))

  @staticmethod
  def unbound_variables(node: Node, env: Environment) -> List[str]:
    return sorted(name for name in get_variables(node) if name not in env)

  @staticmethod
  def is_valid_expression(node: Node, env: Optional[Environment] = None) -> bool:
    """Structural check, plus a finite-value check when ``env`` is given"""
    try:
      ExpressionValidator.validate(node)
    except InvalidTreeError as e:
      log_warning(f"Invalid expression tree: {e}")
      return False

    if env is None:
      return True

    missing = ExpressionValidator.unbound_variables(node, env)
    if missing:
      log_warning(f"Unbound variables: {', '.join(missing)}")
      return False

    return bool(np.isfinite(node.evaluate(env)))
