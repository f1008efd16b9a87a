import pytest

from symbolic_differentiation.expression_tree import (
  Environment, Expression, AddNode, SubNode, MulNode, DivNode, ConstantNode, VariableNode,
  differentiate, render
)
from symbolic_differentiation.expression_tree.utils import get_variables

x = VariableNode("x")
y = VariableNode("y")
z = VariableNode("z")


def test_leaf_rules():
  assert ConstantNode(7.0).derivative("x") == ConstantNode(0.0)
  assert x.derivative("x") == ConstantNode(1.0)
  assert y.derivative("x") == ConstantNode(0.0)
  # names are case-sensitive
  assert VariableNode("X").derivative("x") == ConstantNode(0.0)


def test_sum_and_difference_structure():
  assert AddNode(x, y).derivative("x") == AddNode(ConstantNode(1.0), ConstantNode(0.0))
  assert SubNode(x, y).derivative("y") == SubNode(ConstantNode(0.0), ConstantNode(1.0))


def test_product_rule_structure_shares_operands():
  product = MulNode(x, y)
  d = product.derivative("x")
  assert d == AddNode(MulNode(ConstantNode(1.0), y), MulNode(x, ConstantNode(0.0)))
  assert d.left.right is product.right
  assert d.right.left is product.left


def test_quotient_rule_structure():
  quotient = DivNode(x, y)
  d = quotient.derivative("x")
  expected = DivNode(
    SubNode(MulNode(ConstantNode(1.0), y), MulNode(x, ConstantNode(0.0))),
    MulNode(y, y))
  assert d == expected


def test_product_rule_value():
  # d/dx x^2 = 2x
  e = MulNode(x, x)
  env = Environment(x=3.0)
  assert differentiate(e, "x").evaluate(env) == 6.0


def test_quotient_rule_value():
  # d/dx (x / 2) = (1*2 - x*0) / (2*2) = 0.5
  e = DivNode(x, ConstantNode(2.0))
  env = Environment(x=10.0)
  assert differentiate(e, "x").evaluate(env) == 0.5


def test_quotient_rule_with_variable_denominator():
  # d/dx (1 / x) = -1 / x^2
  e = DivNode(ConstantNode(1.0), x)
  assert e.derivative("x").evaluate(Environment(x=2.0)) == -0.25


def test_sample_tree_derivative(sample_tree, env):
  d = sample_tree.derivative("Xray")
  assert isinstance(d, Expression)
  assert d.to_string() == "(((0*Xray)+(2.3*1))+((0*(Zebra-Xray))+(Yellow*(0-1))))"
  assert d.evaluate(env) == pytest.approx(2.3 - 2.0)


def test_derivative_does_not_touch_source(sample_tree):
  before = sample_tree.to_string()
  sample_tree.derivative("Xray")
  sample_tree.derivative("Zebra")
  assert sample_tree.to_string() == before


TREES = [
  AddNode(MulNode(x, x), ConstantNode(3.0)),
  SubNode(MulNode(x, y), DivNode(y, x)),
  DivNode(AddNode(x, ConstantNode(1.0)), MulNode(y, SubNode(x, z))),
  MulNode(MulNode(x, x), MulNode(x, y)),
]


@pytest.mark.parametrize("tree", TREES)
@pytest.mark.parametrize("var", ["x", "y", "z", "w"])
def test_derivative_introduces_no_new_variables(tree, var):
  assert get_variables(tree.derivative(var)) <= get_variables(tree)


@pytest.mark.parametrize("a", TREES)
@pytest.mark.parametrize("b", TREES[:2])
def test_sum_rule(a, b):
  env = Environment(x=1.5, y=-2.0, z=0.25)
  total = differentiate(AddNode(a, b), "x").evaluate(env)
  parts = a.derivative("x").evaluate(env) + b.derivative("x").evaluate(env)
  assert total == pytest.approx(parts)


@pytest.mark.parametrize("tree", [
  ConstantNode(4.0),
  MulNode(y, AddNode(ConstantNode(3.0), z)),
  DivNode(y, SubNode(z, ConstantNode(2.0))),
])
def test_derivative_of_expression_without_var_is_zero(tree):
  env = Environment(y=2.0, z=5.0)
  assert tree.derivative("x").evaluate(env) == 0.0


def test_repeated_differentiation_grows_tree():
  e = Expression(MulNode(x, MulNode(x, x)))
  d1 = e.derivative("x")
  d2 = d1.derivative("x")
  assert e.size() < d1.size() < d2.size()
  # d^2/dx^2 x^3 = 6x
  assert d2.evaluate(Environment(x=2.0)) == 12.0


def test_derivative_variable_must_be_string(sample_tree):
  with pytest.raises(TypeError):
    sample_tree.derivative(1)


def test_derivative_never_consults_environment(sample_tree):
  # rendering and differentiating succeed without any bindings
  d = differentiate(sample_tree, "nothing")
  assert "Xray" in render(d)


@pytest.mark.parametrize("node", [
  VariableNode("x"),
  ConstantNode(2.0),
  MulNode(x, y),
  DivNode(x, ConstantNode(2.0)),
])
def test_node_derivative_variable_must_be_string(node):
  with pytest.raises(TypeError):
    node.derivative(1)
  with pytest.raises(TypeError):
    node.derivative(None)
