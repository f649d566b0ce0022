import math

import pytest

from symbolic_math.errors import (
  FN_ERRORS, DivisionByZeroError, FnError, LogBaseOneError, NegativeBaseNonIntegerExponentError,
  NegativeEvenRootError, NonPositiveLogArgError, NonPositiveLogBaseError, ParameterNotFoundError
)
from symbolic_math.functions import (
  AddFn, ChildFn, ChildKind, CoefFn, DivFn, ExpFn, Function, LogFn, MulFn, RootFn, SequenceFn, apply,
  to_child
)


class CountingFn(Function):
  """Returns a fixed value and records how often it was applied"""

  __slots__ = ('value', 'calls')

  def __init__(self, value=1.0):
    self.value = value
    self.calls = 0

  def apply(self, args):
    self.calls += 1
    return self.value

  def to_string(self):
    return "counter"

  def variables(self):
    return set()


def test_add_with_variable():
  assert AddFn(2.0, 3.0, 'x').apply({'x': 4.0}) == 9.0


def test_add_missing_parameter():
  with pytest.raises(ParameterNotFoundError) as info:
    AddFn(2.0, 'y').apply({})
  assert info.value.name == 'y'


def test_sequence_identities():
  assert AddFn(5.0).apply({}) == 5.0
  assert MulFn('x').apply({'x': 5.0}) == 5.0
  assert MulFn(2, 3, 4).apply({}) == 24.0
  assert AddFn([1, 2, 3]).apply({}) == 6.0


def test_empty_sequence_rejected():
  with pytest.raises(ValueError):
    AddFn()
  with pytest.raises(ValueError):
    MulFn([])


def test_sequence_short_circuits():
  counter = CountingFn()
  with pytest.raises(ParameterNotFoundError):
    MulFn('missing', counter).apply({})
  assert counter.calls == 0


def test_sequence_first_error_wins():
  with pytest.raises(DivisionByZeroError):
    AddFn(1.0, DivFn(1.0, 0.0), 'missing').apply({})


def test_div():
  assert DivFn(1, 4).apply({}) == 0.25
  with pytest.raises(DivisionByZeroError):
    DivFn(1.0, 0.0).apply({})
  with pytest.raises(DivisionByZeroError):
    DivFn(0.0, -0.0).apply({})


def test_div_evaluates_both_operands_and_prefers_numerator_error():
  counter = CountingFn()
  with pytest.raises(ParameterNotFoundError):
    DivFn('missing', counter).apply({})
  assert counter.calls == 1

  with pytest.raises(ParameterNotFoundError) as info:
    DivFn('a', 'b').apply({})
  assert info.value.name == 'a'

  with pytest.raises(ParameterNotFoundError):
    DivFn('n', DivFn(1.0, 0.0)).apply({})


def test_coef():
  assert CoefFn(3.0, 'x').apply({'x': 2.0}) == 6.0
  with pytest.raises(DivisionByZeroError):
    CoefFn(3.0, DivFn(1.0, 0.0)).apply({})


def test_exp():
  with pytest.raises(NegativeBaseNonIntegerExponentError):
    ExpFn(-1.0, 0.5).apply({})
  assert ExpFn(-1.0, 2.0).apply({}) == 1.0
  assert ExpFn(2, 10).apply({}) == 1024.0
  assert ExpFn(-8.0, -1.0).apply({}) == -0.125
  assert ExpFn(0.0, -1.0).apply({}) == math.inf


def test_exp_prefers_base_error():
  with pytest.raises(ParameterNotFoundError):
    ExpFn('b', DivFn(1.0, 0.0)).apply({})
  with pytest.raises(DivisionByZeroError):
    ExpFn(DivFn(1.0, 0.0), 'e').apply({})


def test_log():
  with pytest.raises(NonPositiveLogArgError):
    LogFn(2.0, -1.0).apply({})
  with pytest.raises(NonPositiveLogBaseError):
    LogFn(-2.0, 4.0).apply({})
  # the argument is checked before the base
  with pytest.raises(NonPositiveLogArgError):
    LogFn(-2.0, -4.0).apply({})
  with pytest.raises(LogBaseOneError):
    LogFn(1.0, 5.0).apply({})
  assert LogFn(2.0, 8.0).apply({}) == pytest.approx(3.0)
  assert LogFn(10, 'x').apply({'x': 1000.0}) == pytest.approx(3.0)


def test_root():
  with pytest.raises(NegativeEvenRootError):
    RootFn(2, -4.0).apply({})
  with pytest.raises(DivisionByZeroError):
    RootFn(0, 4.0).apply({})
  with pytest.raises(NegativeBaseNonIntegerExponentError):
    RootFn(2.5, -1.0).apply({})
  assert RootFn(3, -8.0).apply({}) == pytest.approx(-2.0)
  assert RootFn(2, 'x').apply({'x': 9.0}) == pytest.approx(3.0)


def test_nested_tree():
  tree = AddFn(CoefFn(2.0, 'x'), ExpFn('x', 2), LogFn(2, 'y'))
  assert tree.apply({'x': 3.0, 'y': 8.0}) == pytest.approx(18.0)
  assert tree.variables() == {'x', 'y'}


def test_environment_not_mutated():
  args = {'x': 1.0, 'y': 2.0}
  AddFn('x', MulFn('y', 'x')).apply(args)
  assert args == {'x': 1.0, 'y': 2.0}


def test_tree_reused_with_different_environments():
  tree = DivFn('x', AddFn('y', 1))
  assert tree.apply({'x': 6.0, 'y': 2.0}) == 2.0
  assert tree.apply({'x': 1.0, 'y': 3.0}) == 0.25
  with pytest.raises(DivisionByZeroError):
    tree.apply({'x': 1.0, 'y': -1.0})


def test_apply_entry_point():
  assert apply(AddFn(1, 2)) == 3.0
  assert apply(MulFn('x', 'x'), {'x': 3.0}) == 9.0


def test_to_child_conversions():
  assert to_child('x').kind == ChildKind.VAR
  const = to_child(2)
  assert const.kind == ChildKind.CONST
  assert const.payload == 2.0
  nested = to_child(AddFn(1))
  assert nested.kind == ChildKind.FN
  existing = ChildFn.var('z')
  assert to_child(existing) is existing
  with pytest.raises(TypeError):
    to_child(True)
  with pytest.raises(TypeError):
    to_child(None)


def test_child_fn_apply():
  assert ChildFn.const(1.5).apply({}) == 1.5
  assert ChildFn.var('x').apply({'x': 4.0}) == 4.0
  assert ChildFn.fn(AddFn(1, 1)).apply({}) == 2.0


def test_to_string():
  assert AddFn(2, 'x', MulFn(3, 'y')).to_string() == "(2 + x + (3 * y))"
  assert DivFn('a', 0.5).to_string() == "(a / 0.5)"
  assert CoefFn(3, 'x').to_string() == "3*x"
  assert LogFn(2, ExpFn('x', 2)).to_string() == "log(2, (x ^ 2))"
  assert RootFn(3, 'x').to_string() == "root(3, x)"


def test_error_taxonomy():
  assert len(FN_ERRORS) == 7
  for error_cls in FN_ERRORS:
    assert issubclass(error_cls, FnError)
  assert issubclass(ParameterNotFoundError, KeyError)
  assert str(ParameterNotFoundError('x')) == "Parameter 'x' not found"
  assert str(DivisionByZeroError()) == "Division by zero"


def test_sequence_base_cannot_be_instantiated():
  with pytest.raises(TypeError):
    SequenceFn(1.0)
