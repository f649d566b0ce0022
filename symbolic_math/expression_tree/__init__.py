"""Expression Tree Module

Parsed expression trees: nodes, operator kernels and the Expression wrapper.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    apply_binary_op,
    apply_unary_op,
    evaluate_binary_op,
    evaluate_unary_op
)
from .utils import (
    to_sympy_expression, reference_value, latex_representation,
    get_all_nodes, calculate_tree_depth, find_foldable_subtrees, is_fully_folded
)

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP",
    "apply_binary_op", "apply_unary_op", "evaluate_binary_op", "evaluate_unary_op",
    "to_sympy_expression", "reference_value", "latex_representation",
    "get_all_nodes", "calculate_tree_depth", "find_foldable_subtrees", "is_fully_folded"
]
