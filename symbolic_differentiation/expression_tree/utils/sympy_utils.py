import numpy as np
import sympy as sp
from typing import Any, Dict
from ..core.node import Node
from ..environment import Environment


def to_sympy_expression(node: Node) -> sp.Expr:
  """Convert a node tree to SymPy without simplifying it"""
  return node.to_sympy()


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(node.to_sympy())


class SymPyDerivativeChecker:
  """Cross-checks symbolic derivatives against sympy.diff"""

  def __init__(self, rtol: float = 1e-9, atol: float = 1e-12):
    self.rtol = rtol
    self.atol = atol

  def reference_value(self, node: Node, var: str, env: Environment) -> float:
    """Value of d(node)/d(var) computed by SymPy and evaluated under ``env``"""
    sympy_expr = node.to_sympy()
    derivative = sp.diff(sympy_expr, sp.Symbol(var))
    symbols = sorted(derivative.free_symbols, key=lambda s: s.name)
    func = sp.lambdify(symbols, derivative, modules='numpy')
    args = [np.float64(env.get(s.name)) for s in symbols]
    with np.errstate(divide='ignore', invalid='ignore'):
      return float(func(*args))

  def check(self, node: Node, var: str, env: Environment) -> Dict[str, Any]:
    """
    Compare the tree derivative with SymPy's

    Returns:
        Dict with both values, the absolute error and whether they match
    """
    value = node.derivative(var).evaluate(env)
    reference = self.reference_value(node, var, env)
    if np.isnan(value) and np.isnan(reference):
      matches = True
      abs_error = 0.0
    else:
      abs_error = abs(value - reference)
      matches = bool(np.isclose(value, reference, rtol=self.rtol, atol=self.atol))
    return {
      'value': value,
      'reference': reference,
      'abs_error': abs_error,
      'matches': matches
    }
