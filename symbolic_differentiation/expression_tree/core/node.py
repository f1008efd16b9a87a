import sympy as sp
from abc import ABC, abstractmethod
from numbers import Real
from typing import Optional, Tuple
from .operators import NodeType, OpType, OP_SYMBOLS, evaluate_binary_op
from ..environment import Environment
from ...config import RenderConfig, get_render_config


def _coerce(value) -> Optional['Node']:
  if isinstance(value, Node):
    return value
  if isinstance(value, Real):
    return ConstantNode(value)
  return None


class Node(ABC):
  """Immutable expression tree node.

  Subtrees may be shared between parents; since no node changes after
  construction, sharing never causes aliasing problems. Size and hash are
  cached, evaluation, derivatives and rendering are always recomputed.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._init_slot('_hash_cache', None)
    self._init_slot('_size_cache', None)

  def _init_slot(self, name: str, value):
    object.__setattr__(self, name, value)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @abstractmethod
  def evaluate(self, env: Environment) -> float:
    pass

  def derivative(self, var: str) -> 'Node':
    """Symbolic derivative with respect to ``var``, returned as a new tree"""
    if not isinstance(var, str):
      raise TypeError(f"Differentiation variable must be a string, got {type(var).__name__}")
    return self._derivative(var)

  @abstractmethod
  def _derivative(self, var: str) -> 'Node':
    pass

  @abstractmethod
  def to_string(self, config: Optional[RenderConfig] = None) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def children(self) -> Tuple['Node', ...]:
    return ()

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._init_slot('_size_cache', self._compute_size())
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _args(self) -> tuple:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._init_slot('_hash_cache', self._compute_hash())
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if type(self) is not type(other):
      return False
    return hash(self) == hash(other) and self._args() == other._args()

  def __ne__(self, other) -> bool:
    return not self.__eq__(other)

  def __reduce__(self):
    return (type(self), self._args())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    args = ", ".join(repr(arg) for arg in self._args())
    return f"{type(self).__name__}({args})"

  # Operator sugar builds nodes verbatim, no folding of constants
  def __add__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else AddNode(self, other)

  def __radd__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else AddNode(other, self)

  def __sub__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else SubNode(self, other)

  def __rsub__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else SubNode(other, self)

  def __mul__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else MulNode(self, other)

  def __rmul__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else MulNode(other, self)

  def __truediv__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else DivNode(self, other)

  def __rtruediv__(self, other):
    other = _coerce(other)
    return NotImplemented if other is None else DivNode(other, self)


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self._init_slot('value', float(value))

  def evaluate(self, env: Environment) -> float:
    return self.value

  def _derivative(self, var: str) -> 'ConstantNode':
    return ConstantNode(0.0)

  def to_string(self, config: Optional[RenderConfig] = None) -> str:
    config = config or get_render_config()
    return format(self.value, config.constant_format)

  def to_sympy(self) -> sp.Expr:
    return sp.Float(self.value)

  def _compute_size(self) -> int:
    return 1

  def _args(self) -> tuple:
    return (self.value,)

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    super().__init__()
    self._init_slot('name', name)

  def evaluate(self, env: Environment) -> float:
    return env.get(self.name)

  def _derivative(self, var: str) -> 'ConstantNode':
    # 1 if its the variable, otherwise 0
    return ConstantNode(1.0 if var == self.name else 0.0)

  def to_string(self, config: Optional[RenderConfig] = None) -> str:
    return self.name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _compute_size(self) -> int:
    return 1

  def _args(self) -> tuple:
    return (self.name,)

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))


class BinaryOpNode(Node):
  """Node with two operands; subclasses fix the operator"""

  __slots__ = ('left', 'right')

  op_type: OpType = None

  def __init__(self, left: Node, right: Node):
    for operand in (left, right):
      if not isinstance(operand, Node):
        raise TypeError(f"{type(self).__name__} operands must be Node instances, got {type(operand).__name__}")
    super().__init__()
    self._init_slot('left', left)
    self._init_slot('right', right)

  @property
  def operator(self) -> str:
    return OP_SYMBOLS[self.op_type]

  def evaluate(self, env: Environment) -> float:
    left_val = self.left.evaluate(env)
    right_val = self.right.evaluate(env)
    return float(evaluate_binary_op(left_val, right_val, self.op_type))

  def _render_symbol(self, config: RenderConfig) -> str:
    return self.operator

  def to_string(self, config: Optional[RenderConfig] = None) -> str:
    config = config or get_render_config()
    return f"({self.left.to_string(config)}{self._render_symbol(config)}{self.right.to_string(config)})"

  def children(self) -> Tuple[Node, Node]:
    return (self.left, self.right)

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _args(self) -> tuple:
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.op_type, hash(self.left), hash(self.right)))


class AddNode(BinaryOpNode):
  __slots__ = ()
  op_type = OpType.ADD

  def _derivative(self, var: str) -> Node:
    return AddNode(self.left._derivative(var), self.right._derivative(var))

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self.left.to_sympy(), self.right.to_sympy())


class SubNode(BinaryOpNode):
  __slots__ = ()
  op_type = OpType.SUB

  def _derivative(self, var: str) -> Node:
    return SubNode(self.left._derivative(var), self.right._derivative(var))

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self.left.to_sympy(), sp.Mul(-1, self.right.to_sympy()))


class MulNode(BinaryOpNode):
  __slots__ = ()
  op_type = OpType.MUL

  def _derivative(self, var: str) -> Node:
    # (u * v)' = u' * v + u * v'
    return AddNode(
      MulNode(self.left._derivative(var), self.right),
      MulNode(self.left, self.right._derivative(var)))

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self.left.to_sympy(), self.right.to_sympy())


class DivNode(BinaryOpNode):
  __slots__ = ()
  op_type = OpType.DIV

  def _derivative(self, var: str) -> Node:
    # (u / v)' = (u'v - uv') / (v * v)
    return DivNode(
      SubNode(
        MulNode(self.left._derivative(var), self.right),
        MulNode(self.left, self.right._derivative(var))),
      MulNode(self.right, self.right))

  def _render_symbol(self, config: RenderConfig) -> str:
    return config.division_symbol

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self.left.to_sympy(), sp.Pow(self.right.to_sympy(), -1))
