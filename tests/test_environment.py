from fractions import Fraction

import pytest

from teko.errors import DuplicateDefinition, UnboundVariable, ImmutableBinding
from teko.types.environment import Environment
from teko.types.number import Gaussian
from teko.types.symbol import Symbol


@pytest.fixture
def env():
    """Return a fresh, unseeded environment for each test."""
    return Environment()


def test_create_then_lookup(env):
    env.create(Symbol("a"), 1)
    assert env.lookup(Symbol("a")) == 1


def test_create_existing_binding_fails_and_keeps_value(env):
    env.create(Symbol("a"), 1)
    with pytest.raises(DuplicateDefinition):
        env.create(Symbol("a"), 2)
    assert env.lookup(Symbol("a")) == 1


def test_create_over_pushed_binding_fails(env):
    env.push(Symbol("p"), 1)
    with pytest.raises(DuplicateDefinition):
        env.create(Symbol("p"), 2)


def test_create_after_stack_emptied(env):
    env.push(Symbol("t"), 1)
    env.pop(Symbol("t"))
    env.create(Symbol("t"), 2)
    assert env.lookup(Symbol("t")) == 2


def test_push_pop_round_trip(env):
    env.create(Symbol("x"), "outer")
    env.push(Symbol("x"), "inner")
    assert env.lookup(Symbol("x")) == "inner"
    env.pop(Symbol("x"))
    assert env.lookup(Symbol("x")) == "outer"


def test_push_on_unbound_symbol_then_pop_unbinds(env):
    env.push(Symbol("fresh"), 1)
    assert env.depth(Symbol("fresh")) == 1
    env.pop(Symbol("fresh"))
    assert env.depth(Symbol("fresh")) == 0
    with pytest.raises(UnboundVariable):
        env.lookup(Symbol("fresh"))


def test_pop_empty_stack_is_fatal(env):
    with pytest.raises(RuntimeError):
        env.pop(Symbol("nothing"))


def test_mutate_targets_top_cell_only(env):
    env.create(Symbol("x"), 1)
    env.push(Symbol("x"), 2)
    env.mutate(Symbol("x"), 3)
    assert env.lookup(Symbol("x")) == 3
    env.pop(Symbol("x"))
    assert env.lookup(Symbol("x")) == 1


def test_mutate_unbound_fails(env):
    with pytest.raises(UnboundVariable):
        env.mutate(Symbol("never"), 1)


def test_mutate_immutable_fails(env):
    env.create(Symbol("k"), 1, immutable=True)
    with pytest.raises(ImmutableBinding):
        env.mutate(Symbol("k"), 2)
    assert env.lookup(Symbol("k")) == 1


def test_mutate_shadowing_push_of_constant_is_allowed(env):
    env.create(Symbol("k"), 1, immutable=True)
    env.push(Symbol("k"), 2)
    env.mutate(Symbol("k"), 3)
    assert env.lookup(Symbol("k")) == 3


def test_lookup_unbound_fails(env):
    with pytest.raises(UnboundVariable):
        env.lookup(Symbol("missing"))


def test_numerals_resolve_lazily_as_constants(env):
    assert Symbol("3.14") not in env.stacks
    assert env.lookup(Symbol("3.14")) == Gaussian(Fraction(157, 50))
    assert env.stacks[Symbol("3.14")][-1].immutable
    with pytest.raises(ImmutableBinding):
        env.mutate(Symbol("3.14"), 0)


def test_numerals_cannot_be_defined(env):
    with pytest.raises(DuplicateDefinition):
        env.create(Symbol("42"), "forty-two")


def test_numerals_may_be_shadowed_by_push(env):
    env.push(Symbol("1"), "one")
    assert env.lookup(Symbol("1")) == "one"
    env.pop(Symbol("1"))
    assert env.lookup(Symbol("1")) == Gaussian(1)


def test_is_bound(env):
    env.create(Symbol("a"), 1)
    assert Symbol("a") in env
    assert Symbol("7") in env
    assert Symbol("b") not in env
