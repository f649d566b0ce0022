"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode, format_number
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
  apply_binary_op, apply_unary_op, evaluate_binary_op, evaluate_unary_op
)

__all__ = [
  'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode', 'format_number',
  'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
  'apply_binary_op', 'apply_unary_op', 'evaluate_binary_op', 'evaluate_unary_op'
]
