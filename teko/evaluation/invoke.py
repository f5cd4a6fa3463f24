"""Call protocol for Teko.

This module centralizes application semantics:
- Functions evaluate their arguments left to right, push one binding per
  parameter, run the body, then pop the bindings in reverse order.
- Macros receive the raw argument list bound to their single parameter. The
  body builds a template, the parameter is popped, and the template is then
  evaluated in the caller's (live, dynamic) environment.
- Primitives and primitive macros are dispatched the same way as their user
  counterparts; only the calling convention differs.

Binding cleanup is carried by a Restore frame on the control stack, so the
same pops run whether the body returns normally or an unwind passes through.

Tail calls: when a function is applied and the frame on top of the stack is
the Restore frame of the enclosing body, the call is the last thing that body
does. Instead of stacking a second Restore, the callee's bindings are merged
into the existing one. Pending bindings the callee shadows are popped first,
since nothing can observe them again, which keeps both the control stack and
the binding stacks bounded across any number of tail calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from teko import Expression, Value
from teko.errors import ArityMismatch, NotCallable
from teko.evaluation.frames import (
    EVAL, RETURN, UNWIND, Step, Frame, Unwound,
    Arguments, Expand, Restore, sequence,
)
from teko.printer import to_string
from teko.types.closure import Function, Macro, Primitive, PrimitiveMacro
from teko.types.symbol import position_of

if TYPE_CHECKING:
    from teko.evaluation.evaluator import Evaluator


def call(
    ev: Evaluator, callee: Value, args: list[Expression], stack: list[Frame], site: Expression = None
) -> Step:
    """Apply `callee` to the unevaluated argument expressions `args`.

    `site` is the head of the application as written; faults report its position.
    """
    if isinstance(callee, (Function, Primitive)):
        if not args:
            return apply(ev, callee, [], stack, site)
        stack.append(Arguments(callee, args, site))
        return EVAL, args[0]

    if isinstance(callee, Macro):
        return expand(ev, callee, args, stack)

    if isinstance(callee, PrimitiveMacro):
        return _primitive_result(callee.fn(ev, list(args)))

    raise NotCallable(f"Cannot apply non-function {to_string(callee)}", *position_of(site))


def apply(
    ev: Evaluator, callee: Value, values: list[Value], stack: list[Frame], site: Expression = None
) -> Step:
    """Apply a function or primitive to already-evaluated arguments."""
    if isinstance(callee, Primitive):
        return _primitive_result(callee.fn(ev, values))

    params = callee.params
    if len(params) != len(values):
        raise ArityMismatch(
            f"{to_string(callee)} expects {len(params)} argument(s), got {len(values)}",
            *position_of(site),
        )

    top = stack[-1] if stack else None
    if isinstance(top, Restore):
        top.release(ev, frozenset(params))
        restore = top
    else:
        restore = Restore()
        stack.append(restore)

    env = ev.env
    for param, value in zip(params, values):
        env.push(param, value)
        restore.symbols.append(param)

    return sequence(callee.body, stack)


def expand(ev: Evaluator, macro: Macro, args: list[Expression], stack: list[Frame]) -> Step:
    """Phase one of a macro call: run the body with the raw arguments bound.

    The Expand frame below the Restore performs phase two once the template
    comes back and the parameter has been popped.
    """
    stack.append(Expand())
    restore = Restore()
    stack.append(restore)
    ev.env.push(macro.param, list(args))
    restore.symbols.append(macro.param)
    return sequence(macro.body, stack)


def _primitive_result(result: Value) -> Step:
    # Primitives that evaluate code may hand back an in-flight unwind.
    if isinstance(result, Unwound):
        return UNWIND, result
    return RETURN, result
