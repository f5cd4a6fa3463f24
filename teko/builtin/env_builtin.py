"""Built-in functions for the Teko runtime environment.

This module defines the constants, arithmetic, comparison, list processing,
predicates, error values and I/O exposed to Teko code. Every primitive is
called as fn(evaluator, args) with already-evaluated arguments.
"""
from __future__ import annotations

import math
from itertools import pairwise

from teko import Value
from teko.errors import ArityMismatch, TekoTypeError, TekoDomainError
from teko.printer import display, to_string
from teko.types.closure import Primitive
from teko.types.environment import Environment
from teko.types.error_value import Error
from teko.types.null import Null, NullType
from teko.types.number import Gaussian, is_number, to_inexact
from teko.types.symbol import Symbol


def _arity(name: str, args: list[Value], count: int) -> None:
    if len(args) != count:
        raise ArityMismatch(f"{name} requires exactly {count} argument(s), got {len(args)}")


def _numbers(name: str, args: list[Value]) -> list:
    """Check argument types; coerce everything to inexact if any arg is inexact."""
    for x in args:
        if not is_number(x):
            raise TekoTypeError(f"All arguments to {name} must be numbers")
    if any(not isinstance(x, Gaussian) for x in args):
        return [to_inexact(x) for x in args]
    return list(args)


# -------------------------------
# Arithmetic
# -------------------------------
def add(ev, args: list[Value]) -> Value:
    """Return the sum of all arguments; (+) is 0."""
    result = Gaussian(0)
    for x in _numbers("+", args):
        result = result + x
    return result


def sub(ev, args: list[Value]) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise ArityMismatch("- requires at least 1 argument")
    nums = _numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result = result - x
    return result


def mul(ev, args: list[Value]) -> Value:
    """Return the product of all arguments; (*) is 1."""
    result = Gaussian(1)
    for x in _numbers("*", args):
        result = result * x
    return result


def div(ev, args: list[Value]) -> Value:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise ArityMismatch("/ requires at least 1 argument")
    nums = _numbers("/", args)
    if len(nums) == 1:
        nums = [Gaussian(1) if isinstance(nums[0], Gaussian) else 1.0] + nums
    result = nums[0]
    try:
        for x in nums[1:]:
            result = result / x
    except ZeroDivisionError:
        raise TekoDomainError("Division by zero")
    return result


# -------------------------------
# Comparison
# -------------------------------
def num_eq(ev, args: list[Value]) -> bool:
    nums = _numbers("=", args)
    return all(a == b for a, b in pairwise(nums))


def num_ne(ev, args: list[Value]) -> bool:
    return not num_eq(ev, args)


def _ordered(name: str, args: list[Value], test) -> bool:
    nums = _numbers(name, args)
    try:
        return all(test(a, b) for a, b in pairwise(nums))
    except TypeError:
        raise TekoTypeError(f"Cannot order complex numbers with {name}")


def lt(ev, args: list[Value]) -> bool:
    """Chainable less-than: true if a0 < a1 < a2 ... holds for all pairs."""
    return _ordered("<", args, lambda a, b: a < b)


def lte(ev, args: list[Value]) -> bool:
    return _ordered("<=", args, lambda a, b: a <= b)


def gt(ev, args: list[Value]) -> bool:
    return _ordered(">", args, lambda a, b: a > b)


def gte(ev, args: list[Value]) -> bool:
    return _ordered(">=", args, lambda a, b: a >= b)


def logical_not(ev, args: list[Value]) -> bool:
    """Logical NOT: only false is false."""
    _arity("not", args, 1)
    return args[0] is False


def is_equal(a: Value, b: Value) -> bool:
    """Structural equality; lists compare element-wise, Null equals the empty list."""
    if a is b:
        return True
    if isinstance(a, NullType) or isinstance(b, NullType):
        return a in (Null, []) and b in (Null, [])
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    return a == b


def equals(ev, args: list[Value]) -> bool:
    return all(is_equal(a, b) for a, b in pairwise(args))


# -------------------------------
# Lists
# -------------------------------
def _as_list(name: str, value: Value) -> list:
    if isinstance(value, NullType):
        return []
    if isinstance(value, list):
        return value
    raise TekoTypeError(f"{name} expects a list, got {display(value)}")


def head(ev, args: list[Value]) -> Value:
    """Return the first element of a non-empty list."""
    _arity("head", args, 1)
    xs = _as_list("head", args[0])
    if not xs:
        raise TekoTypeError("head of an empty list")
    return xs[0]


def tail(ev, args: list[Value]) -> Value:
    """Return all but the first element; () once the list is exhausted."""
    _arity("tail", args, 1)
    xs = _as_list("tail", args[0])
    if not xs:
        raise TekoTypeError("tail of an empty list")
    return xs[1:] or Null


def pair(ev, args: list[Value]) -> list:
    """(pair x xs) => a new list with x in front of xs."""
    _arity("pair", args, 2)
    return [args[0]] + _as_list("pair", args[1])


def make_list(ev, args: list[Value]) -> Value:
    return list(args) or Null


def is_null(ev, args: list[Value]) -> bool:
    _arity("null?", args, 1)
    return args[0] is Null or args[0] == []


def is_symbol(ev, args: list[Value]) -> bool:
    _arity("symbol?", args, 1)
    return isinstance(args[0], Symbol)


def is_num(ev, args: list[Value]) -> bool:
    _arity("number?", args, 1)
    return is_number(args[0])


def is_string(ev, args: list[Value]) -> bool:
    _arity("string?", args, 1)
    return isinstance(args[0], str)


# -------------------------------
# Errors
# -------------------------------
def make_error(ev, args: list[Value]) -> Error:
    """(error datum) wraps arbitrary data; several args are wrapped as a list."""
    if len(args) == 1:
        return Error(args[0])
    return Error(list(args) or Null)


def is_error(ev, args: list[Value]) -> bool:
    _arity("error?", args, 1)
    return isinstance(args[0], Error)


def error_payload(ev, args: list[Value]) -> Value:
    _arity("error-payload", args, 1)
    if not isinstance(args[0], Error):
        raise TekoTypeError(f"error-payload expects an error, got {display(args[0])}")
    return args[0].payload


# -------------------------------
# Strings and symbols
# -------------------------------
def string_append(ev, args: list[Value]) -> str:
    return "".join(display(x) for x in args)


def string_to_symbol(ev, args: list[Value]) -> Symbol:
    _arity("string->symbol", args, 1)
    if not isinstance(args[0], str):
        raise TekoTypeError("string->symbol expects a string")
    return Symbol(args[0])


def symbol_to_string(ev, args: list[Value]) -> str:
    _arity("symbol->string", args, 1)
    if not isinstance(args[0], Symbol):
        raise TekoTypeError("symbol->string expects a symbol")
    return str(args[0])


# -------------------------------
# I/O
# -------------------------------
def print_values(ev, args: list[Value]) -> Value:
    """Write each argument followed by a space; returns the last argument."""
    out = ev.stdout
    for x in args:
        out.write(display(x))
        out.write(" ")
    out.flush()
    return args[-1] if args else Null


def newline(ev, args: list[Value]) -> Value:
    _arity("newline", args, 0)
    ev.stdout.write("\n")
    ev.stdout.flush()
    return Null


def write_values(ev, args: list[Value]) -> Value:
    """Like print, but writes each argument in the form it reads back as."""
    out = ev.stdout
    for x in args:
        out.write(to_string(x))
        out.write(" ")
    out.flush()
    return args[-1] if args else Null


def read_line(ev, args: list[Value]) -> Value:
    """Read one line from stdin without its terminator; () at end of input."""
    _arity("read-line", args, 0)
    line = ev.input.readline()
    if not line:
        return Null
    return line.rstrip("\n")


def read_string(ev, args: list[Value]) -> Value:
    """(read-string) reads the rest of stdin, (read-string k) at most k characters.

    Returns () once stdin is exhausted.
    """
    if len(args) > 1:
        raise ArityMismatch(f"read-string takes at most 1 argument, got {len(args)}")
    size = -1
    if args:
        k = args[0]
        if not isinstance(k, Gaussian) or not k.is_integer or k.real < 0:
            raise TekoTypeError("read-string expects a non-negative integer")
        size = int(k)
    text = ev.input.read(size)
    if not text and size != 0:
        return Null
    return text


def read_expr(ev, args: list[Value]) -> Value:
    """Read one expression from stdin, unevaluated, like quote; () at end of input."""
    _arity("read", args, 0)
    expr = ev.input.read_expression()
    if expr is None or expr == []:
        return Null
    return expr


# -------------------------------
# Evaluation
# -------------------------------
def eval_value(ev, args: list[Value]) -> Value:
    """(eval expr) evaluates an expression value in the current environment."""
    _arity("eval", args, 1)
    return ev.evaluate(args[0])


PRIMITIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": num_eq,
    "!=": num_ne,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "eq?": equals,
    "head": head,
    "tail": tail,
    "pair": pair,
    "list": make_list,
    "null?": is_null,
    "symbol?": is_symbol,
    "number?": is_num,
    "string?": is_string,
    "error": make_error,
    "error?": is_error,
    "error-payload": error_payload,
    "string-append": string_append,
    "string->symbol": string_to_symbol,
    "symbol->string": symbol_to_string,
    "print": print_values,
    "newline": newline,
    "write": write_values,
    "read": read_expr,
    "read-line": read_line,
    "read-string": read_string,
    "eval": eval_value,
}


def seed_constants(env: Environment) -> None:
    """Install true, false, () as constants and pi as a mutable float."""
    env.create(Symbol("true"), True, immutable=True)
    env.create(Symbol("false"), False, immutable=True)
    env.create(Symbol("()"), Null, immutable=True)
    env.create(Symbol("pi"), math.pi)


def register(env: Environment) -> None:
    """Register the constants and primitive functions in `env`."""
    seed_constants(env)
    for name, fn in PRIMITIVES.items():
        env.create(Symbol(name), Primitive(name, fn))
