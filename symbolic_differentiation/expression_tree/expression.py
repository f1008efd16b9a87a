import sympy as sp
from typing import Optional, Set, Union
from .core.node import Node
from .environment import Environment
from .utils.tree_utils import calculate_tree_depth, get_variables
from ..config import RenderConfig
from ..logging_system import log_debug, debug_enabled


class Expression:
  """Root handle for an expression tree"""

  __slots__ = ('root',)

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    object.__setattr__(self, "root", root)

  def __setattr__(self, name, value):
    raise AttributeError("Expression is immutable")

  def __delattr__(self, name):
    raise AttributeError("Expression is immutable")

  def evaluate(self, env: Environment) -> float:
    return self.root.evaluate(env)

  def derivative(self, var: str) -> 'Expression':
    """Symbolic derivative with respect to ``var``, returned as a new tree"""
    result = Expression(self.root.derivative(var))
    if debug_enabled():
      log_debug(f"d/d{var}: {self.size()} nodes -> {result.size()} nodes")
    return result

  def to_string(self, config: Optional[RenderConfig] = None) -> str:
    return self.root.to_string(config)

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    """Tree depth, leaves count as 1"""
    return calculate_tree_depth(self.root)

  def variables(self) -> Set[str]:
    return get_variables(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def to_latex(self) -> str:
    return sp.latex(self.to_sympy())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self.root == other.root

  def __reduce__(self):
    return (Expression, (self.root,))


Tree = Union[Expression, Node]


def _as_expression(tree: Tree) -> Expression:
  if isinstance(tree, Expression):
    return tree
  return Expression(tree)


def evaluate(tree: Tree, env: Environment) -> float:
  """Numeric value of ``tree`` under the bindings in ``env``"""
  return _as_expression(tree).evaluate(env)


def differentiate(tree: Tree, var: str) -> Expression:
  """Symbolic derivative of ``tree`` with respect to ``var``"""
  return _as_expression(tree).derivative(var)


def render(tree: Tree, config: Optional[RenderConfig] = None) -> str:
  """Fully parenthesized infix text of ``tree``"""
  return _as_expression(tree).to_string(config)


def evaluate_expression_tree(tree: Tree, env: Environment) -> float:
  return evaluate(tree, env)
