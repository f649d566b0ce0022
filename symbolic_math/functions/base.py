"""
Function-tree building blocks.

A function tree is assembled by hand from named nodes (see `nodes`) and
evaluated against an `FnArgs` mapping. Domain violations are raised as
`FnError` subclasses and propagate up the tree unchanged.
"""

import numbers
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Mapping, Optional, Set, Tuple, Union

from ..errors import FnError, ParameterNotFoundError
from ..expression_tree.core.node import format_number
from ..logging_system import get_logger

FnArgs = Mapping[str, float]


class Function(ABC):
  """A named mathematical operation evaluated against variable bindings"""

  __slots__ = ()

  @abstractmethod
  def apply(self, args: FnArgs) -> float:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def variables(self) -> Set[str]:
    pass

  def _fail(self, error: FnError) -> FnError:
    logger = get_logger()
    if logger.is_verbose():
      logger.debug(f"{type(self).__name__}: {error} in {self.to_string()}")
    return error

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class ChildKind(IntEnum):
  FN = 0
  VAR = 1
  CONST = 2


class ChildFn(Function):
  """Operand of a function node: a nested function, a variable lookup or a literal"""

  __slots__ = ('kind', 'payload')

  def __init__(self, kind: ChildKind, payload: Union[Function, str, float]):
    self.kind = kind
    self.payload = payload

  @classmethod
  def fn(cls, function: Function) -> 'ChildFn':
    return cls(ChildKind.FN, function)

  @classmethod
  def var(cls, name: str) -> 'ChildFn':
    return cls(ChildKind.VAR, name)

  @classmethod
  def const(cls, value: float) -> 'ChildFn':
    return cls(ChildKind.CONST, float(value))

  def apply(self, args: FnArgs) -> float:
    if self.kind == ChildKind.FN:
      return self.payload.apply(args)
    if self.kind == ChildKind.VAR:
      try:
        return float(args[self.payload])
      except KeyError:
        raise self._fail(ParameterNotFoundError(self.payload)) from None
    return self.payload

  def to_string(self) -> str:
    if self.kind == ChildKind.FN:
      return self.payload.to_string()
    if self.kind == ChildKind.VAR:
      return self.payload
    return format_number(self.payload)

  def variables(self) -> Set[str]:
    if self.kind == ChildKind.FN:
      return self.payload.variables()
    if self.kind == ChildKind.VAR:
      return {self.payload}
    return set()


ChildLike = Union[ChildFn, Function, str, float, int]


def to_child(value: ChildLike) -> ChildFn:
  """
  Convert a plain value into a ChildFn leaf.

  str -> variable, int/float -> constant, Function -> nested function.
  """
  if isinstance(value, ChildFn):
    return value
  if isinstance(value, Function):
    return ChildFn.fn(value)
  if isinstance(value, str):
    return ChildFn.var(value)
  if isinstance(value, numbers.Real) and not isinstance(value, bool):
    return ChildFn.const(value)
  raise TypeError(f"Cannot use {type(value).__name__} as a function operand")


def apply_pair(first: ChildFn, second: ChildFn, args: FnArgs) -> Tuple[float, float]:
  """
  Evaluate both operands of a two-operand node.

  Both are always evaluated; if both fail, the first operand's error wins.
  """
  first_error: Optional[FnError] = None
  second_error: Optional[FnError] = None
  first_val = second_val = 0.0

  try:
    first_val = first.apply(args)
  except FnError as e:
    first_error = e

  try:
    second_val = second.apply(args)
  except FnError as e:
    second_error = e

  if first_error is not None:
    raise first_error
  if second_error is not None:
    raise second_error
  return first_val, second_val


def apply(function: Function, args: Optional[FnArgs] = None) -> float:
  """Evaluate `function` against `args` (no bindings when omitted)"""
  return function.apply(args if args is not None else {})
