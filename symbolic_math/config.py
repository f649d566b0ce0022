"""Parser configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
  """Switches controlling how source text is turned into a tree"""
  fold_constants: bool = True           # collapse all-constant sub-trees while parsing
  implicit_multiplication: bool = True  # treat `2x`, `x(y)` as products
  max_depth: int = 100                  # limit on grouping nesting and on built tree depth

  def __post_init__(self):
    if not isinstance(self.max_depth, int) or self.max_depth <= 0:
      raise ValueError("max_depth must be a positive integer")


DEFAULT_CONFIG = ParserConfig()
