from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, ClassVar, List, Optional, Sequence, Union

import numpy as np


class NodeType(IntEnum):
  OPERATOR = 0
  VARIABLE = 1
  CONSTANT = 2


@dataclass(frozen=True)
class Operator:
  """Operator payload: a pure function from an ordered list of operands to one value.

  ``arity`` is optional. When declared, ``Tree.link`` checks the number of
  children against it; otherwise the arity contract is only documented and a
  mismatch surfaces when the function runs.
  """

  function: Callable[[List[Any]], Any]
  name: str = ''
  arity: Optional[int] = None
  symbol: Optional[str] = None
  sympy_function: Optional[Callable] = field(default=None, compare=False)

  node_type: ClassVar[NodeType] = NodeType.OPERATOR

  def __post_init__(self):
    if not callable(self.function):
      raise TypeError("Operator function must be callable")
    if self.arity is not None and self.arity < 1:
      raise ValueError("Operator arity must be a positive integer")
    if not self.name:
      object.__setattr__(self, 'name', getattr(self.function, '__name__', 'operator'))

  def apply(self, operands: Sequence[Any]) -> Any:
    return self.function(list(operands))

  def __str__(self) -> str:
    return self.name


@dataclass(frozen=True)
class Variable:
  name: str

  node_type: ClassVar[NodeType] = NodeType.VARIABLE

  def __post_init__(self):
    if not isinstance(self.name, str):
      raise TypeError("Variable name must be a string")

  def __str__(self) -> str:
    return self.name


@dataclass(frozen=True, eq=False)
class Constant:
  value: Any

  node_type: ClassVar[NodeType] = NodeType.CONSTANT

  def __eq__(self, other) -> bool:
    if not isinstance(other, Constant):
      return NotImplemented
    return values_equal(self.value, other.value)

  def __hash__(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def __str__(self) -> str:
    if isinstance(self.value, float):
      return f"{self.value:g}"
    return str(self.value)


Expression = Union[Operator, Variable, Constant]
EXPRESSION_TYPES = (Operator, Variable, Constant)


def as_operator(op) -> Operator:
  """Wrap a bare callable into an Operator; Operators pass through"""
  if isinstance(op, Operator):
    return op
  if callable(op):
    return Operator(op)
  raise TypeError(f"Expected an Operator or a callable, got {type(op).__name__}")


def values_equal(left: Any, right: Any) -> bool:
  """Equality that also handles numpy arrays"""
  if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
    return bool(np.array_equal(left, right))
  return bool(left == right)
