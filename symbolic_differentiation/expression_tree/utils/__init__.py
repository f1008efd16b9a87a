"""Utilities for expression trees."""

from .sympy_utils import SymPyDerivativeChecker, to_sympy_expression, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    find_nodes_by_operator, get_constants, get_variables, get_binary_ops
)
from .validator import ExpressionValidator

__all__ = [
    'SymPyDerivativeChecker', 'to_sympy_expression', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'find_nodes_by_operator', 'get_constants', 'get_variables', 'get_binary_ops',
    'ExpressionValidator'
]
