import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_math import (
  Expression, ParserConfig, LogLevel, configure_logging,
  AddFn, CoefFn, DivFn, ExpFn, LogFn, FnError
)


def parser_demo():
  """Parse a few expressions and show what survives constant folding"""
  for source in ["2*3+4", "2x + 3(4 - 1)", "x(x+1)", "sin(0) + y^2"]:
    expr = Expression.from_string(source)
    print(f"{source:<16} -> {expr.to_string()}")

  expr = Expression.from_string("2x^2 - 3x + 1")
  X = np.linspace(-1, 1, 5)
  print(f"\n{expr.to_string()} over {X}:")
  print(expr.evaluate({'x': X}))

  unfolded = Expression.from_string("1+2*3", ParserConfig(fold_constants=False))
  print(f"\nWithout folding: {unfolded.to_string()} = {unfolded.eval_const()}")


def function_tree_demo():
  """Build a function tree by hand and evaluate it against several bindings"""
  # 2x + x^y / log_2(z)
  tree = AddFn(CoefFn(2.0, 'x'), DivFn(ExpFn('x', 'y'), LogFn(2.0, 'z')))
  print(f"\nFunction tree: {tree.to_string()}")

  for args in [{'x': 2.0, 'y': 3.0, 'z': 4.0},
               {'x': -2.0, 'y': 0.5, 'z': 4.0},
               {'x': 2.0, 'y': 3.0, 'z': 1.0},
               {'x': 2.0, 'y': 3.0}]:
    try:
      print(f"  {args} -> {tree.apply(args):.6f}")
    except FnError as e:
      print(f"  {args} -> {type(e).__name__}: {e}")


if __name__ == "__main__":
  configure_logging(LogLevel.MINIMAL)
  parser_demo()
  function_tree_demo()
