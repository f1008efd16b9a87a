import pytest

from symbolic_differentiation.expression_tree import Environment, UnboundVariableError, ExpressionTreeError


def test_set_and_get():
  env = Environment()
  env.set("x", 3)
  assert env.get("x") == 3.0
  assert isinstance(env.get("x"), float)


def test_set_overwrites_binding():
  env = Environment(x=1.0)
  env.set("x", 5.5)
  assert env.get("x") == 5.5
  assert len(env) == 1


def test_unbound_name_raises():
  env = Environment(x=1.0)
  with pytest.raises(UnboundVariableError) as excinfo:
    env.get("y")
  assert excinfo.value.name == "y"
  assert isinstance(excinfo.value, LookupError)
  assert isinstance(excinfo.value, ExpressionTreeError)


def test_names_are_case_sensitive():
  env = Environment(Xray=1.0)
  assert "Xray" in env
  assert "xray" not in env
  with pytest.raises(UnboundVariableError):
    env.get("xray")


def test_from_mapping_and_iteration():
  env = Environment.from_mapping({"a": 1, "b": 2.5})
  assert sorted(env) == ["a", "b"]
  assert env.names() == ["a", "b"]
  assert env.get("b") == 2.5


def test_update_and_repr():
  env = Environment()
  env.update({"x": 2.0})
  assert repr(env) == "Environment(x=2.0)"


def test_non_string_name_rejected():
  env = Environment()
  with pytest.raises(TypeError):
    env.set(1, 2.0)


def test_non_numeric_value_rejected():
  env = Environment()
  with pytest.raises((TypeError, ValueError)):
    env.set("x", "not a number")
  assert "x" not in env


@pytest.mark.parametrize("value", ["3", b"3", "inf"])
def test_string_values_rejected(value):
  with pytest.raises(TypeError):
    Environment.from_mapping({"y": value})
  env = Environment()
  with pytest.raises(TypeError):
    env.set("y", value)
  assert "y" not in env
