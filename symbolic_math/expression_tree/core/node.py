import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Set, Union
from .operators import (
  NodeType, BINARY_OP_MAP, UNARY_OP_MAP,
  apply_binary_op, apply_unary_op, evaluate_binary_op, evaluate_unary_op
)
from ...errors import NonConstantExpressionError, ParameterNotFoundError

Value = Union[float, np.ndarray]
Env = Mapping[str, Value]


def format_number(value: float) -> str:
  if value.is_integer() and abs(value) < 1e16:
    return str(int(value))
  return repr(value)


class Node(ABC):
  """Base node of a parsed expression tree. Nodes are never mutated after construction."""

  __slots__ = ('_hash_cache', '_size_cache', '_depth_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._depth_cache: Optional[int] = None

  @abstractmethod
  def eval_const(self) -> float:
    """Value of a fully constant tree"""

  @abstractmethod
  def evaluate(self, env: Env) -> Value:
    """Value of the tree with variables bound from `env`"""

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def is_constant(self) -> bool:
    pass

  @abstractmethod
  def children(self) -> tuple:
    pass

  def variables(self) -> Set[str]:
    names: Set[str] = set()
    for child in self.children():
      names |= child.variables()
    return names

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def depth(self) -> int:
    """Longest root-to-leaf path, leaves have depth 1"""
    if self._depth_cache is None:
      self._depth_cache = 1 + max((child.depth() for child in self.children()), default=0)
    return self._depth_cache

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash(self._key())
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self._key() == other._key()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    self.name = name

  def eval_const(self) -> float:
    raise NonConstantExpressionError(self.name)

  def evaluate(self, env: Env) -> Value:
    try:
      value = env[self.name]
    except KeyError:
      raise ParameterNotFoundError(self.name) from None
    return np.asarray(value, dtype=np.float64)

  def to_string(self) -> str:
    return self.name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def is_constant(self) -> bool:
    return False

  def children(self) -> tuple:
    return ()

  def variables(self) -> Set[str]:
    return {self.name}

  def _key(self) -> tuple:
    return (NodeType.VARIABLE, self.name)


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def eval_const(self) -> float:
    return self.value

  def evaluate(self, env: Env) -> Value:
    return np.float64(self.value)

  def to_string(self) -> str:
    return format_number(self.value)

  def to_sympy(self) -> sp.Expr:
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def is_constant(self) -> bool:
    return True

  def children(self) -> tuple:
    return ()

  def _key(self) -> tuple:
    return (NodeType.CONSTANT, self.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator}")
    super().__init__()
    self.operator = operator
    self.left = left
    self.right = right

  def eval_const(self) -> float:
    left_val = self.left.eval_const()
    right_val = self.right.eval_const()
    return float(apply_binary_op(left_val, right_val, BINARY_OP_MAP[self.operator]))

  def evaluate(self, env: Env) -> Value:
    left_val = self.left.evaluate(env)
    right_val = self.right.evaluate(env)
    return evaluate_binary_op(left_val, right_val, self.operator)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    elif self.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    return sp.Pow(left, right)

  def is_constant(self) -> bool:
    return self.left.is_constant() and self.right.is_constant()

  def children(self) -> tuple:
    return (self.left, self.right)

  def _key(self) -> tuple:
    return (NodeType.BINARY_OP, self.operator, self.left._key(), self.right._key())


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  def __init__(self, operator: str, operand: Node):
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Unknown unary operator: {operator}")
    super().__init__()
    self.operator = operator
    self.operand = operand

  def eval_const(self) -> float:
    return float(apply_unary_op(self.operand.eval_const(), UNARY_OP_MAP[self.operator]))

  def evaluate(self, env: Env) -> Value:
    return evaluate_unary_op(self.operand.evaluate(env), self.operator)

  def to_string(self) -> str:
    if self.operator == 'neg':
      return f"(-{self.operand.to_string()})"
    return f"{self.operator}({self.operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    operand = self.operand.to_sympy()
    if self.operator == 'neg':
      return -operand
    return sp.sin(operand)

  def is_constant(self) -> bool:
    return self.operand.is_constant()

  def children(self) -> tuple:
    return (self.operand,)

  def _key(self) -> tuple:
    return (NodeType.UNARY_OP, self.operator, self.operand._key())
