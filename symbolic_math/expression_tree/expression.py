import numpy as np
from typing import Callable, List, Optional, Set
from .core.node import Node, Env, Value
from ..config import ParserConfig
import sympy as sp


class Expression:
  """Parsed expression with a cached string form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  @classmethod
  def from_string(cls, source: str, config: Optional[ParserConfig] = None) -> 'Expression':
    from ..parser import parse
    return cls(parse(source, config))

  def evaluate(self, env: Optional[Env] = None) -> Value:
    """Evaluate with variables bound from `env`; arrays in `env` give an array result"""
    result = self.root.evaluate(env or {})
    if np.ndim(result) == 0:
      return float(result)
    return result

  def eval_const(self) -> float:
    return self.root.eval_const()

  def is_constant(self) -> bool:
    return self.root.is_constant()

  def variables(self) -> Set[str]:
    return self.root.variables()

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def lambdify(self) -> Callable:
    """
    Compile the expression to a numpy function.

    Positional arguments follow the sorted variable names, see `argument_names`.
    """
    symbols = [sp.Symbol(name) for name in self.argument_names()]
    return sp.lambdify(symbols, self.to_sympy(), modules='numpy')

  def argument_names(self) -> List[str]:
    return sorted(self.variables())

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"
