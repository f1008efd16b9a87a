from typing import Dict, Iterator, List, Mapping
from .errors import UnboundVariableError
from ..logging_system import log_debug


class Environment:
  """Variable bindings consulted while evaluating an expression tree.

  Names are case-sensitive. Bindings can be added or overwritten but never
  removed. Not safe for concurrent mutation; finish all ``set`` calls before
  evaluating from several threads.
  """

  __slots__ = ('_bindings',)

  def __init__(self, **bindings: float):
    self._bindings: Dict[str, float] = {}
    self.update(bindings)

  @classmethod
  def from_mapping(cls, mapping: Mapping[str, float]) -> 'Environment':
    env = cls()
    env.update(mapping)
    return env

  def set(self, name: str, value: float):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    if isinstance(value, (str, bytes)):
      raise TypeError(f"Value for '{name}' must be numeric, got {type(value).__name__}")
    value = float(value)
    log_debug(f"bind {name} = {value!r}")
    self._bindings[name] = value

  def get(self, name: str) -> float:
    try:
      return self._bindings[name]
    except KeyError:
      raise UnboundVariableError(name) from None

  def update(self, mapping: Mapping[str, float]):
    for name, value in mapping.items():
      self.set(name, value)

  def names(self) -> List[str]:
    return list(self._bindings)

  def __contains__(self, name) -> bool:
    return name in self._bindings

  def __len__(self) -> int:
    return len(self._bindings)

  def __iter__(self) -> Iterator[str]:
    return iter(self._bindings)

  def __repr__(self) -> str:
    items = ", ".join(f"{name}={value!r}" for name, value in self._bindings.items())
    return f"Environment({items})"
