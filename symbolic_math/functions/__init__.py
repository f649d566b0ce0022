"""Hand-built function trees evaluated against named variables."""

from .base import Function, ChildFn, ChildKind, FnArgs, to_child, apply_pair, apply
from .nodes import SequenceFn, AddFn, MulFn, DivFn, CoefFn, ExpFn, LogFn, RootFn

__all__ = [
  'Function', 'ChildFn', 'ChildKind', 'FnArgs', 'to_child', 'apply_pair', 'apply',
  'SequenceFn', 'AddFn', 'MulFn', 'DivFn', 'CoefFn', 'ExpFn', 'LogFn', 'RootFn'
]
