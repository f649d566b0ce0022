"""Utilities for expression trees."""

from .sympy_utils import to_sympy_expression, reference_value, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_variables, get_constants,
    count_variable_nodes, get_variable_usage_counts, find_nodes_by_operator,
    find_foldable_subtrees, is_fully_folded
)

__all__ = [
    'to_sympy_expression', 'reference_value', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'get_variables', 'get_constants',
    'count_variable_nodes', 'get_variable_usage_counts', 'find_nodes_by_operator',
    'find_foldable_subtrees', 'is_fully_folded'
]
