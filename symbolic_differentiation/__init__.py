# Python

"""Symbolic Differentiation Package

Arithmetic expression trees with numeric evaluation, symbolic
differentiation and fully parenthesized rendering.
"""

from .expression_tree import (
  Expression, Environment, Node, ConstantNode, VariableNode,
  BinaryOpNode, AddNode, SubNode, MulNode, DivNode,
  evaluate, differentiate, render, evaluate_expression_tree,
  ExpressionTreeError, UnboundVariableError, InvalidTreeError,
  ExpressionValidator, SymPyDerivativeChecker
)
from .config import RenderConfig, get_render_config, set_render_config
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Environment", "Node", "ConstantNode", "VariableNode",
  "BinaryOpNode", "AddNode", "SubNode", "MulNode", "DivNode",
  "evaluate", "differentiate", "render", "evaluate_expression_tree",
  "ExpressionTreeError", "UnboundVariableError", "InvalidTreeError",
  "ExpressionValidator", "SymPyDerivativeChecker",
  "RenderConfig", "get_render_config", "set_render_config",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
