"""Exceptions raised by expression trees and environments."""


class ExpressionTreeError(Exception):
  """Base class for expression tree errors"""


class UnboundVariableError(ExpressionTreeError, LookupError):
  """A variable was evaluated but has no binding in the environment"""

  def __init__(self, name: str):
    super().__init__(f"Variable '{name}' is not bound in the environment")
    self.name = name


class InvalidTreeError(ExpressionTreeError, ValueError):
  """The node graph is not a finite, acyclic expression tree"""
