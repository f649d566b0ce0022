import numpy as np
from abc import abstractmethod
from typing import List, Set

from ..errors import (
  DivisionByZeroError, LogBaseOneError, NegativeBaseNonIntegerExponentError,
  NegativeEvenRootError, NonPositiveLogArgError, NonPositiveLogBaseError
)
from ..expression_tree.core.node import format_number
from .base import ChildFn, ChildLike, FnArgs, Function, apply_pair, to_child


def _is_integral(value: float) -> bool:
  return float(value).is_integer()


def _power(base: float, exponent: float) -> float:
  # IEEE result (0 ** -1 -> inf, overflow -> inf) rather than Python's exceptions
  with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
    return float(np.power(np.float64(base), np.float64(exponent)))


class SequenceFn(Function):
  """Shared shape of n-ary nodes: an ordered, non-empty list of children folded left to right"""

  __slots__ = ('children',)

  identity: float
  symbol: str

  def __init__(self, *children: ChildLike):
    if len(children) == 1 and isinstance(children[0], (list, tuple)):
      children = tuple(children[0])
    if not children:
      raise ValueError(f"{type(self).__name__} needs at least one child")
    self.children: List[ChildFn] = [to_child(child) for child in children]

  @abstractmethod
  def combine(self, acc: float, value: float) -> float:
    pass

  def apply(self, args: FnArgs) -> float:
    result = self.identity
    for child in self.children:
      # the first failing child ends the fold, later children are not evaluated
      result = self.combine(result, child.apply(args))
    return result

  def to_string(self) -> str:
    return "(" + f" {self.symbol} ".join(child.to_string() for child in self.children) + ")"

  def variables(self) -> Set[str]:
    names: Set[str] = set()
    for child in self.children:
      names |= child.variables()
    return names

  def __len__(self) -> int:
    return len(self.children)


class AddFn(SequenceFn):
  __slots__ = ()
  identity = 0.0
  symbol = '+'

  def combine(self, acc: float, value: float) -> float:
    return acc + value


class MulFn(SequenceFn):
  __slots__ = ()
  identity = 1.0
  symbol = '*'

  def combine(self, acc: float, value: float) -> float:
    return acc * value


class DivFn(Function):
  __slots__ = ('numerator', 'denominator')

  def __init__(self, numerator: ChildLike, denominator: ChildLike):
    self.numerator = to_child(numerator)
    self.denominator = to_child(denominator)

  def apply(self, args: FnArgs) -> float:
    n, d = apply_pair(self.numerator, self.denominator, args)
    if d == 0.0:
      raise self._fail(DivisionByZeroError())
    return n / d

  def to_string(self) -> str:
    return f"({self.numerator.to_string()} / {self.denominator.to_string()})"

  def variables(self) -> Set[str]:
    return self.numerator.variables() | self.denominator.variables()


class CoefFn(Function):
  """Scales a single child by a fixed coefficient without building a MulFn"""

  __slots__ = ('coefficient', 'child')

  def __init__(self, coefficient: float, child: ChildLike):
    self.coefficient = float(coefficient)
    self.child = to_child(child)

  def apply(self, args: FnArgs) -> float:
    return self.coefficient * self.child.apply(args)

  def to_string(self) -> str:
    return f"{format_number(self.coefficient)}*{self.child.to_string()}"

  def variables(self) -> Set[str]:
    return self.child.variables()


class ExpFn(Function):
  __slots__ = ('base', 'exponent')

  def __init__(self, base: ChildLike, exponent: ChildLike):
    self.base = to_child(base)
    self.exponent = to_child(exponent)

  def apply(self, args: FnArgs) -> float:
    b, n = apply_pair(self.base, self.exponent, args)
    if b < 0.0 and not _is_integral(n):
      raise self._fail(NegativeBaseNonIntegerExponentError())
    return _power(b, n)

  def to_string(self) -> str:
    return f"({self.base.to_string()} ^ {self.exponent.to_string()})"

  def variables(self) -> Set[str]:
    return self.base.variables() | self.exponent.variables()


class LogFn(Function):
  __slots__ = ('base', 'argument')

  def __init__(self, base: ChildLike, argument: ChildLike):
    self.base = to_child(base)
    self.argument = to_child(argument)

  def apply(self, args: FnArgs) -> float:
    b, a = apply_pair(self.base, self.argument, args)
    if a <= 0.0:
      raise self._fail(NonPositiveLogArgError())
    if b <= 0.0:
      raise self._fail(NonPositiveLogBaseError())
    if b == 1.0:
      raise self._fail(LogBaseOneError())
    return float(np.log(a) / np.log(b))

  def to_string(self) -> str:
    return f"log({self.base.to_string()}, {self.argument.to_string()})"

  def variables(self) -> Set[str]:
    return self.base.variables() | self.argument.variables()


class RootFn(Function):
  """Real `degree`-th root of `argument`; odd integral degrees accept negative arguments"""

  __slots__ = ('degree', 'argument')

  def __init__(self, degree: ChildLike, argument: ChildLike):
    self.degree = to_child(degree)
    self.argument = to_child(argument)

  def apply(self, args: FnArgs) -> float:
    d, a = apply_pair(self.degree, self.argument, args)
    if d == 0.0:
      raise self._fail(DivisionByZeroError())
    if a < 0.0:
      if not _is_integral(d):
        raise self._fail(NegativeBaseNonIntegerExponentError())
      if int(d) % 2 == 0:
        raise self._fail(NegativeEvenRootError())
      return -_power(-a, 1.0 / d)
    return _power(a, 1.0 / d)

  def to_string(self) -> str:
    return f"root({self.degree.to_string()}, {self.argument.to_string()})"

  def variables(self) -> Set[str]:
    return self.degree.variables() | self.argument.variables()
