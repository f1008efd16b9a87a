"""
Tree Utility Functions

Tree traversal and analysis utilities for expression trees. All traversals
here are iterative, so they work on trees deeper than the interpreter's
recursion limit.
"""

from collections import deque
from typing import List, Set, Type, TypeVar

from ..core.node import Node, BinaryOpNode, ConstantNode, VariableNode

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Shared subtrees are visited once per parent, so the result has
    ``node.size()`` entries.

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
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left operand before right operand"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]

    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in current_node.children():
            stack.append((child, depth + 1))

    return max_depth


def find_nodes_by_type(node: Node, node_type: Type[T]) -> List[T]:
    """Find all nodes of a specific type, in depth-first order"""
    return [n for n in _depth_first_traversal(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[BinaryOpNode]:
    """Find all binary nodes with a specific operator symbol"""
    return [n for n in get_binary_ops(node) if n.operator == operator]


def get_constants(node: Node) -> List[ConstantNode]:
    return find_nodes_by_type(node, ConstantNode)


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    return find_nodes_by_type(node, BinaryOpNode)


def get_variables(node: Node) -> Set[str]:
    """Names of all variables referenced in the tree"""
    return {n.name for n in find_nodes_by_type(node, VariableNode)}
