"""Core expression tree components."""

from .node import Node, ConstantNode, VariableNode, BinaryOpNode, AddNode, SubNode, MulNode, DivNode
from .operators import NodeType, OpType, BINARY_OP_MAP, OP_SYMBOLS, evaluate_binary_op

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'BinaryOpNode',
    'AddNode', 'SubNode', 'MulNode', 'DivNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'OP_SYMBOLS', 'evaluate_binary_op'
]
