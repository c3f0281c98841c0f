import pytest

from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispInvalidSymbol, LispUnboundSymbol
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol
from tinylisp.builtin.env_builtin import make_global_environment

X = Symbol("x")
Y = Symbol("y")


def test_define_and_lookup():
    env = Environment()
    env.define(X, 1)
    assert env.lookup(X) == 1
    env.define(X, 2)  # last write wins
    assert env.lookup(X) == 2


def test_lookup_unbound():
    with pytest.raises(LispUnboundSymbol):
        Environment().lookup(X)


def test_define_requires_symbol():
    with pytest.raises(LispInvalidSymbol):
        Environment().define("x", 1)


def test_child_shadows_parent_without_touching_it():
    parent = Environment()
    parent.define(X, 1)
    child = parent.child_with({X: 10, Y: 20})
    assert child.lookup(X) == 10
    assert child.lookup(Y) == 20
    assert parent.lookup(X) == 1
    assert parent.find(Y) is None


def test_child_sees_later_parent_definitions():
    parent = Environment()
    child = parent.child_with()
    parent.define(Y, "late")
    assert child.lookup(Y) == "late"
    assert child.find(Y) is parent


def test_global_environment_constants():
    env = make_global_environment()
    assert env.lookup(Symbol("true")) is True
    assert env.lookup(Symbol("t")) is True
    assert env.lookup(Symbol("false")) is False
    assert env.lookup(Symbol("nil")) is Nil
    assert callable(env.lookup(Symbol("+")))
