"""Cross-checks of parsed trees against evaluators that do not share the parser's folding."""

import math
import operator

import pytest

from symbolic_math import Expression, ParserConfig
from symbolic_math.expression_tree import BinaryOpNode, ConstantNode, UnaryOpNode, VariableNode
from symbolic_math.expression_tree.utils import reference_value
from symbolic_math.parser import parse, parse_tokens, tokenize

NO_FOLD = ParserConfig(fold_constants=False)

BINARY_TABLE = {
  '+': operator.add,
  '-': operator.sub,
  '*': operator.mul,
  '/': operator.truediv,
  '^': operator.pow,
}
UNARY_TABLE = {
  'sin': math.sin,
  'neg': operator.neg,
}


def walk(node, env):
  """Table-driven evaluator over plain Python floats"""
  if isinstance(node, ConstantNode):
    return node.value
  if isinstance(node, VariableNode):
    return env[node.name]
  if isinstance(node, BinaryOpNode):
    return BINARY_TABLE[node.operator](walk(node.left, env), walk(node.right, env))
  if isinstance(node, UnaryOpNode):
    return UNARY_TABLE[node.operator](walk(node.operand, env))
  raise TypeError(node)


CONSTANT_SOURCES = [
  "2*3+4",
  "1+2*3-4/5",
  "(1+2)*(3+4)",
  "2^10",
  "2^3^2",
  "-2^2",
  "2^-1",
  "10/4",
  "1.5*2.25",
  "((7))",
  "sin(1)+sin(2)*3",
  "100 - 99 - 1",
  "3 - -3",
]


@pytest.mark.parametrize("source", CONSTANT_SOURCES)
def test_folded_value_matches_sympy(source):
  assert parse(source).eval_const() == pytest.approx(reference_value(source))


@pytest.mark.parametrize("source", CONSTANT_SOURCES)
def test_unfolded_tree_matches_folded_value(source):
  folded = parse(source)
  unfolded = parse(source, NO_FOLD)
  assert isinstance(folded, ConstantNode)
  assert unfolded.eval_const() == pytest.approx(folded.value)
  assert walk(unfolded, {}) == pytest.approx(folded.value)


@pytest.mark.parametrize("source, env", [
  ("x*y + 2*x - y/3", {'x': 1.5, 'y': -2.0}),
  ("sin(x) * (x + 1)^2", {'x': 0.3}),
  ("-x^3 + 4*x*x - 7", {'x': 2.5}),
  ("a / (b - c) + 2^a", {'a': 3.0, 'b': 1.0, 'c': 0.5}),
])
def test_variable_expressions_match_sympy(source, env):
  expected = reference_value(source, env)
  assert Expression.from_string(source).evaluate(env) == pytest.approx(expected)
  assert walk(parse(source, NO_FOLD), env) == pytest.approx(expected)


def test_round_trip_one_plus_two():
  for config in (None, NO_FOLD):
    tree = parse_tokens(tokenize("1+2"), config)
    assert walk(tree, {}) == 3.0
    assert Expression(tree).evaluate() == 3.0


@pytest.mark.parametrize("source, env, expected", [
  ("2x", {'x': 5.0}, 10.0),
  ("2(3+4)", {}, 14.0),
  ("x(x+1)", {'x': 3.0}, 12.0),
  ("2+3*4", {}, 14.0),
])
def test_tree_walk_examples(source, env, expected):
  assert walk(parse(source), env) == expected
  assert walk(parse(source, NO_FOLD), env) == expected
