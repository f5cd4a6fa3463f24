"""Control-stack frames for the iterative evaluator.

The evaluator never recurses on the host stack. Pending work lives on an
explicit list of frames; each frame knows how to resume when the value it was
waiting for arrives, and how to clean up when an unwind passes through it.

A step is a pair (state, payload):

    (EVAL, expression)   evaluate `expression` next
    (RETURN, value)      hand `value` to the frame on top of the stack
    (UNWIND, Unwound)    drop frames until a wind frame catches the signal
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from teko import Expression, Value
from teko.types.null import Null
from teko.types.symbol import Symbol

if TYPE_CHECKING:
    from teko.evaluation.evaluator import Evaluator

logger = logging.getLogger(__name__)

EVAL = 0
RETURN = 1
UNWIND = 2

Step = tuple[int, object]

# Returned by Frame.unwind when the frame does not stop the unwind.
NOT_CAUGHT = object()


class Unwound:
    """In-flight non-local transfer carrying a payload to the nearest wind."""

    __slots__ = ("payload",)

    def __init__(self, payload: Value):
        self.payload = payload

    def __repr__(self) -> str:
        return f"Unwound({self.payload!r})"


class Frame:
    __slots__ = ()

    def resume(self, ev: Evaluator, value: Value, stack: list[Frame]) -> Step:
        raise NotImplementedError

    def unwind(self, ev: Evaluator, signal: Unwound):
        return NOT_CAUGHT


def sequence(body: list[Expression], stack: list[Frame]) -> Step:
    """Evaluate body forms in order; the last one runs in tail position."""
    if not body:
        return RETURN, Null
    if len(body) > 1:
        stack.append(Sequence(body))
    return EVAL, body[0]


class Sequence(Frame):
    __slots__ = ("body", "index")

    def __init__(self, body: list[Expression]):
        self.body = body
        self.index = 1

    def resume(self, ev, value, stack):
        form = self.body[self.index]
        self.index += 1
        if self.index < len(self.body):
            stack.append(self)
        return EVAL, form


class Restore(Frame):
    """Pops the bindings a call pushed, on return or while unwinding."""

    __slots__ = ("symbols",)

    def __init__(self):
        self.symbols: list[Symbol] = []

    def release(self, ev, shadowed: frozenset[Symbol]) -> None:
        """Pop now any pending binding the next tail call is about to shadow."""
        keep = []
        for sym in self.symbols:
            if sym in shadowed:
                ev.env.pop(sym)
            else:
                keep.append(sym)
        self.symbols = keep

    def _pop_all(self, ev) -> None:
        env = ev.env
        for sym in reversed(self.symbols):
            env.pop(sym)
        self.symbols = []

    def resume(self, ev, value, stack):
        self._pop_all(ev)
        return RETURN, value

    def unwind(self, ev, signal):
        self._pop_all(ev)
        return NOT_CAUGHT


class Operator(Frame):
    """Waiting for the head of an application to evaluate to a callable."""

    __slots__ = ("head", "args")

    def __init__(self, head: Expression, args: list[Expression]):
        # The unevaluated head locates faults at the call site.
        self.head = head
        self.args = args

    def resume(self, ev, value, stack):
        from teko.evaluation.invoke import call
        return call(ev, value, self.args, stack, self.head)


class Arguments(Frame):
    """Collects evaluated arguments left to right, then applies the callee."""

    __slots__ = ("callee", "exprs", "values", "site")

    def __init__(self, callee: Value, exprs: list[Expression], site: Expression = None):
        self.callee = callee
        self.exprs = exprs
        self.values: list[Value] = []
        self.site = site

    def resume(self, ev, value, stack):
        values = self.values
        values.append(value)
        if len(values) < len(self.exprs):
            stack.append(self)
            return EVAL, self.exprs[len(values)]
        from teko.evaluation.invoke import apply
        return apply(ev, self.callee, values, stack, self.site)


class Expand(Frame):
    """Second phase of a macro call: evaluate the template in the caller's env."""

    __slots__ = ()

    def resume(self, ev, value, stack):
        logger.debug("macro expansion: %r", value)
        return EVAL, value


class Branch(Frame):
    __slots__ = ("consequent", "alternative")

    def __init__(self, consequent: Expression, alternative: Expression):
        self.consequent = consequent
        self.alternative = alternative

    def resume(self, ev, value, stack):
        if value is False:
            return EVAL, self.alternative
        return EVAL, self.consequent


class Define(Frame):
    __slots__ = ("name",)

    def __init__(self, name: Symbol):
        self.name = name

    def resume(self, ev, value, stack):
        ev.env.create(self.name, value)
        return RETURN, Null


class Assign(Frame):
    __slots__ = ("name",)

    def __init__(self, name: Symbol):
        self.name = name

    def resume(self, ev, value, stack):
        ev.env.mutate(self.name, value)
        return RETURN, value


class Wind(Frame):
    """Catch point for unwinds raised anywhere within its dynamic extent."""

    __slots__ = ("depth",)

    def __init__(self, depth: int):
        # Control-stack height at entry; everything above it belongs to the body.
        self.depth = depth

    def resume(self, ev, value, stack):
        ev.winds.pop()
        logger.debug("wind exited normally at depth %d", self.depth)
        return RETURN, value

    def unwind(self, ev, signal):
        ev.winds.pop()
        logger.debug("wind at depth %d caught %r", self.depth, signal.payload)
        return signal.payload


class Throw(Frame):
    """Waiting for the payload of an unwind."""

    __slots__ = ()

    def resume(self, ev, value, stack):
        if not ev.winds:
            logger.debug("unwind with no active wind: %r", value)
        return UNWIND, Unwound(value)
