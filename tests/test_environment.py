import pytest

from scheme.errors import SchemeEnvironmentError, SchemeUnboundName
from scheme.types.symbol import Symbol

x, y = Symbol("x"), Symbol("y")


def test_new_environment_has_root_frame(env):
    assert env.depth == 1
    assert env.lookup(x) is None
    assert x not in env


def test_bind_and_lookup(env):
    env.bind(x, 1)
    assert env.lookup(x) == 1
    assert env.resolve(x) == 1
    assert x in env


def test_newest_binding_in_frame_wins(env):
    env.bind(x, 1)
    env.bind(x, 2)
    assert env.lookup(x) == 2


def test_inner_frame_shadows_and_pop_restores(env):
    env.bind(x, 1)
    env.push_frame()
    env.bind(x, 2)
    env.bind(y, 3)
    assert env.lookup(x) == 2
    env.pop_frame()
    assert env.lookup(x) == 1
    assert env.lookup(y) is None


def test_outer_frames_are_visible(env):
    env.bind(x, 1)
    env.push_frame()
    env.push_frame()
    assert env.lookup(x) == 1


def test_pop_root_frame_fails(env):
    with pytest.raises(SchemeEnvironmentError):
        env.pop_frame()
    env.push_frame()
    env.pop_frame()
    with pytest.raises(SchemeEnvironmentError):
        env.pop_frame()


def test_frame_context_pops_on_error(env):
    with pytest.raises(ZeroDivisionError):
        with env.frame():
            env.bind(x, 1)
            1 / 0
    assert env.depth == 1
    assert env.lookup(x) is None


def test_resolve_unbound(env):
    with pytest.raises(SchemeUnboundName):
        env.resolve(x)


def test_bind_requires_symbol(env):
    with pytest.raises(SchemeEnvironmentError):
        env.bind("x", 1)


def test_str_and_repr(env):
    env.bind(x, 1)
    assert str(env) == "{x: 1}"
    env.push_frame()
    env.bind(y, 2)
    assert str(env) == "{y: 2} -> ..."
    assert repr(env) == "<Environment frames: {y: 2} -> {x: 1}>"
