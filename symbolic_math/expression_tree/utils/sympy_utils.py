import sympy as sp
from sympy.parsing.sympy_parser import parse_expr, standard_transformations, convert_xor
from typing import Mapping, Optional, Union

from ..core.node import Node
from ..expression import Expression

# Explicit operators only: SymPy's implicit multiplication does not bind the
# way the engine's parser does (`6/2x`), so it is left out on purpose.
_REFERENCE_TRANSFORMATIONS = standard_transformations + (convert_xor,)


def to_sympy_expression(tree: Union[Node, Expression]) -> sp.Expr:
  """Convert a parsed tree (or Expression) to a SymPy expression"""
  return tree.to_sympy()


def reference_value(source: str, env: Optional[Mapping[str, float]] = None) -> float:
  """
  Evaluate `source` with SymPy's own parser, independently of this package.

  Only explicit operators are understood; `^` means power.
  """
  sympy_expr = parse_expr(source, transformations=_REFERENCE_TRANSFORMATIONS, evaluate=True)
  subs = {sp.Symbol(name): value for name, value in (env or {}).items()}
  return float(sympy_expr.evalf(subs=subs))


def latex_representation(tree: Union[Node, Expression]) -> str:
  """LaTeX form of the tree"""
  return sp.latex(to_sympy_expression(tree))
