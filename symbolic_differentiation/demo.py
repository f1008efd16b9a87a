"""
Demo driver: evaluate, differentiate and print a sample expression tree.
"""
import argparse
from typing import List, Optional

from .config import RenderConfig
from .expression_tree import (
  Environment, Expression, AddNode, SubNode, MulNode, ConstantNode, VariableNode
)
from .logging_system import LogLevel, configure_logging, log_milestone


def build_sample_environment() -> Environment:
  env = Environment()
  env.set("Xray", 1.0)
  env.set("Yellow", 2.0)
  env.set("Zebra", 3.0)
  return env


def build_sample_expression() -> Expression:
  # (2.3 * Xray) + (Yellow * (Zebra - Xray))
  return Expression(
    AddNode(
      MulNode(
        ConstantNode(2.3),
        VariableNode("Xray")),
      MulNode(
        VariableNode("Yellow"),
        SubNode(
          VariableNode("Zebra"),
          VariableNode("Xray")))))


def main(argv: Optional[List[str]] = None) -> int:
  parser = argparse.ArgumentParser(description="Evaluate and differentiate a sample expression tree")
  parser.add_argument("--var", default="Xray", help="Variable to differentiate with respect to")
  parser.add_argument("--legacy-division", action="store_true",
                      help="Render division with '*' like the old printer")
  parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
  args = parser.parse_args(argv)

  configure_logging(LogLevel.VERBOSE if args.verbose else LogLevel.SILENT)
  config = RenderConfig(division_symbol='*' if args.legacy_division else '/')

  env = build_sample_environment()
  expr = build_sample_expression()

  result = expr.evaluate(env)
  print(f"\n{expr.to_string(config)}")
  print(f"Evaluates to: {result:g}\n")

  d_expr = expr.derivative(args.var)
  derivative_result = d_expr.evaluate(env)
  print(d_expr.to_string(config))
  print(f"Evaluates to: {derivative_result:g}\n")

  log_milestone(f"Differentiated {expr.size()}-node tree into {d_expr.size()} nodes")
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
