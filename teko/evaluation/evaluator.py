"""Core evaluator for the Teko interpreter.

`Evaluator.evaluate` is a loop over an explicit control stack (see frames.py).
Special forms and calls push frames instead of recursing, and tail positions
replace the current expression instead of pushing, so host-stack usage does
not depend on how deeply or how often the program calls itself.

Unwinding is explicit as well: an Unwound signal pops frames one by one,
letting each Restore frame pop its bindings, until a Wind frame takes the
payload. If the stack runs out first, `evaluate` returns the Unwound to its
caller, which is either the interpreter (fatal) or a primitive that called
back into the evaluator (which passes it on).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from teko import Expression, Value
from teko.errors import TekoError
from teko.evaluation.frames import (
    EVAL, RETURN, UNWIND, NOT_CAUGHT, Step, Frame, Unwound, Operator, Wind,
)
from teko.evaluation.special_forms import SPECIAL_FORMS
from teko.evaluation.special_forms.names import NULL_SYMBOL
from teko.reader.input_stream import InputStream
from teko.types.environment import Environment
from teko.types.error_value import Error
from teko.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Evaluator:
    """Owns the environment and the wind stack for one interpreter run."""

    def __init__(
        self,
        env: Environment,
        stdout: TextIO | None = None,
        stdin: TextIO | None = None,
    ):
        self.env = env
        self.winds: list[Wind] = []
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stdin = stdin if stdin is not None else sys.stdin
        self.input = InputStream(self.stdin)

    def evaluate(self, expr: Expression) -> Value | Unwound:
        """Evaluate `expr` to a value, or return the unwind nobody caught."""
        stack: list[Frame] = []
        state, current = EVAL, expr

        while True:
            if state == EVAL:
                try:
                    state, current = self._step(current, stack)
                except TekoError as exc:
                    state, current = self._fault(exc)

            elif state == RETURN:
                if not stack:
                    return current
                frame = stack.pop()
                try:
                    state, current = frame.resume(self, current, stack)
                except TekoError as exc:
                    state, current = self._fault(exc)

            else:
                caught = NOT_CAUGHT
                while stack and caught is NOT_CAUGHT:
                    caught = stack.pop().unwind(self, current)
                if caught is NOT_CAUGHT:
                    return current
                state, current = RETURN, caught

    def _step(self, expr: Expression, stack: list[Frame]) -> Step:
        if isinstance(expr, Symbol):
            return RETURN, self.env.lookup(expr)

        if isinstance(expr, list):
            if not expr:
                return RETURN, self.env.lookup(NULL_SYMBOL)
            head = expr[0]
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](expr[1:], self, stack)
            stack.append(Operator(head, expr[1:]))
            return EVAL, head

        # Values spliced into templates by macros evaluate to themselves.
        return RETURN, expr

    @staticmethod
    def _fault(exc: TekoError) -> Step:
        logger.debug("fault delivered as unwind: %s: %s", type(exc).__name__, exc)
        return UNWIND, Unwound(Error.from_exception(exc))
