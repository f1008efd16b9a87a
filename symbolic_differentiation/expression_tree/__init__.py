"""Expression Tree Module

Expression trees with evaluation, symbolic differentiation and rendering.
"""

from .expression import Expression, evaluate, differentiate, render, evaluate_expression_tree
from .environment import Environment
from .errors import ExpressionTreeError, UnboundVariableError, InvalidTreeError
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    BinaryOpNode,
    AddNode,
    SubNode,
    MulNode,
    DivNode
)
from .core.operators import NodeType, OpType, BINARY_OP_MAP, evaluate_binary_op
from .utils import ExpressionValidator, SymPyDerivativeChecker

__all__ = [
    "Expression", "evaluate", "differentiate", "render", "evaluate_expression_tree",
    "Environment",
    "ExpressionTreeError", "UnboundVariableError", "InvalidTreeError",
    "Node", "ConstantNode", "VariableNode", "BinaryOpNode",
    "AddNode", "SubNode", "MulNode", "DivNode",
    "NodeType", "OpType", "BINARY_OP_MAP", "evaluate_binary_op",
    "ExpressionValidator", "SymPyDerivativeChecker"
]
