from __future__ import annotations

import logging
from typing import Iterable, TextIO

from teko import Expression, Value
from teko.builtin import register_primitives, register_macros
from teko.errors import UnhandledUnwind
from teko.evaluation.evaluator import Evaluator
from teko.evaluation.frames import Unwound
from teko.reader.parser import parse
from teko.types.environment import Environment
from teko.types.error_value import Error
from teko.types.null import Null

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Teko programs.
    Maintains one Environment (and wind stack) across calls, so definitions
    made by one call to `eval` are visible to the next.
    """

    def __init__(self, stdout: TextIO | None = None, stdin: TextIO | None = None):
        self.env: Environment = Environment()
        register_primitives(self.env)
        register_macros(self.env)
        self.evaluator = Evaluator(self.env, stdout=stdout, stdin=stdin)

    def interpret(self, program: Iterable[Expression]) -> Value:
        """Evaluate expressions in order; return the last value, or () if none.

        An unwind that escapes every wind frame ends the run: core faults are
        re-raised as the original TekoError, anything else as UnhandledUnwind.
        """
        result: Value = Null
        count = 0
        for count, expr in enumerate(program, 1):
            result = self.evaluator.evaluate(expr)
            if isinstance(result, Unwound):
                self._escaped(result)
        logger.debug("evaluated %d top-level expression(s)", count)
        return result

    def eval(self, code: str) -> Value:
        """Parse `code` and evaluate every expression in it."""
        logger.debug("evaluating %d characters of source", len(code))
        return self.interpret(parse(code))

    def _escaped(self, signal: Unwound) -> None:
        payload = signal.payload
        if isinstance(payload, Error) and payload.cause is not None:
            logger.debug("uncaught fault: %s", payload.cause)
            raise payload.cause
        logger.debug("uncaught unwind: %r", payload)
        raise UnhandledUnwind(payload)
