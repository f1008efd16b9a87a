import pytest

from symbolic_differentiation import config, logging_system
from symbolic_differentiation.expression_tree import (
  Environment, Expression, AddNode, SubNode, MulNode, ConstantNode, VariableNode
)


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
  """Each test starts with default logging and render configuration"""
  monkeypatch.setattr(logging_system, "_global_logger", None)
  monkeypatch.setattr(config, "_default_render_config", None)


@pytest.fixture
def env():
  return Environment(Xray=1.0, Yellow=2.0, Zebra=3.0)


@pytest.fixture
def sample_tree():
  # (2.3 * Xray) + (Yellow * (Zebra - Xray))
  return Expression(
    AddNode(
      MulNode(ConstantNode(2.3), VariableNode("Xray")),
      MulNode(VariableNode("Yellow"), SubNode(VariableNode("Zebra"), VariableNode("Xray")))))
