import sys

import pytest

from teko.interpreter import Interpreter
from teko.types.closure import Primitive
from teko.types.null import Null
from teko.types.number import Gaussian
from teko.types.symbol import Symbol


COUNTDOWN = """
(define count (fn (n) (if (= n 0) n (count (- n 1)))))
"""


def test_tail_recursive_countdown_runs_without_host_recursion():
    """A self tail call must not grow the host stack.

    The recursion limit is lowered well below the iteration count; the loop
    only completes if calls in tail position are iterated, not nested.
    """
    interp = Interpreter()
    interp.eval(COUNTDOWN)

    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(400)
    try:
        result = interp.eval("(count 20000)")
    finally:
        sys.setrecursionlimit(old_limit)

    assert result == Gaussian(0)


@pytest.mark.slow
def test_tail_recursive_countdown_from_one_million():
    interp = Interpreter()
    interp.eval(COUNTDOWN)
    assert interp.eval("(count 1000000)") == Gaussian(0)


def test_tail_calls_keep_binding_stacks_bounded():
    interp = Interpreter()
    depths = []

    def record_depth(ev, args):
        depths.append(ev.env.depth(Symbol("n")))
        return Null

    interp.env.create(Symbol("depth-of-n"), Primitive("depth-of-n", record_depth))
    interp.eval("""
    (define loop (fn (n) (depth-of-n) (if (= n 0) (quote done) (loop (- n 1)))))
    """)

    assert interp.eval("(loop 500)") == Symbol("done")
    assert set(depths) == {1}
    # Bindings are gone once the loop returns.
    assert interp.env.depth(Symbol("n")) == 0


def test_mutual_tail_recursion():
    interp = Interpreter()
    interp.eval("""
    (define even? (fn (n) (if (= n 0) true (odd? (- n 1)))))
    (define odd? (fn (m) (if (= m 0) false (even? (- m 1)))))
    """)
    assert interp.eval("(even? 5000)") is True
    assert interp.eval("(odd? 5001)") is True
    assert interp.env.depth(Symbol("n")) == 0
    assert interp.env.depth(Symbol("m")) == 0


def test_tail_call_does_not_hide_caller_bindings_from_callee():
    """Only bindings the callee shadows may be released early."""
    interp = Interpreter()
    interp.eval("""
    (define inner (fn (y) (+ x y)))
    (define outer (fn (x) (inner 1)))
    """)
    assert interp.eval("(outer 41)") == Gaussian(42)


def test_accumulating_tail_recursion():
    interp = Interpreter()
    interp.eval("""
    (define fact (fn (n acc) (if (= n 0) acc (fact (- n 1) (* n acc)))))
    """)
    result = interp.eval("(fact 300 1)")
    assert isinstance(result, Gaussian)
    assert result.is_integer
    assert result.real > 0


def test_deeply_nested_non_tail_expression():
    interp = Interpreter()
    depth = 5000
    program = "(+ 1 " * depth + "0" + ")" * depth
    assert interp.eval(program) == Gaussian(depth)
