"""
Tree Utility Functions

Traversal and analysis helpers for parsed expression trees.
"""

from typing import Dict, List, Set
from collections import Counter, deque

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, explicit stack)"""
    stack = [node]
    nodes = []

    while stack:
        current_node = stack.pop()
        nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return nodes


def calculate_tree_depth(node: Node) -> int:
    """Maximum depth of the tree (leaf nodes have depth 1)"""
    return node.depth()


def get_variables(node: Node) -> Set[str]:
    return node.variables()


def get_constants(node: Node) -> List[float]:
    """Constant leaf values in depth-first order"""
    return [n.value for n in _depth_first_traversal(node) if isinstance(n, ConstantNode)]


def count_variable_nodes(node: Node) -> int:
    """Number of variable references, counting repeats"""
    return sum(1 for n in get_all_nodes(node) if isinstance(n, VariableNode))


def get_variable_usage_counts(node: Node) -> Counter:
    return Counter(n.name for n in get_all_nodes(node) if isinstance(n, VariableNode))


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    return [n for n in get_all_nodes(node)
            if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator]


def find_foldable_subtrees(node: Node) -> List[Node]:
    """
    Operator nodes whose whole sub-tree is constant, in breadth-first order.

    A tree produced by the parser with folding enabled has none.
    """
    nodes = _breadth_first_traversal(node)

    # Children follow their parents in breadth-first order, so walking it
    # backwards settles every child before its parent.
    constant: Dict[int, bool] = {}
    for n in reversed(nodes):
        if isinstance(n, ConstantNode):
            constant[id(n)] = True
        elif isinstance(n, VariableNode):
            constant[id(n)] = False
        else:
            constant[id(n)] = all(constant[id(child)] for child in n.children())

    return [n for n in nodes
            if isinstance(n, (BinaryOpNode, UnaryOpNode)) and constant[id(n)]]


def is_fully_folded(node: Node) -> bool:
    return not find_foldable_subtrees(node)
