# Wind/unwind: a minimal exception mechanism.
# Usage:
#   (wind (print (" Before)) (unwind (" Lorem ipsum)) (print (" After)))
#   ; prints "Before " and evaluates to "Lorem ipsum"
#
# `wind` is an ordinary sequencing form that doubles as a catch point.
# `unwind` evaluates its payload and transfers it to the nearest enclosing
# wind, popping every binding pushed since that wind was entered.

import logging

from teko import Expression
from teko.errors import TekoSyntaxError
from teko.evaluation.frames import EVAL, Step, Throw, Wind, sequence

logger = logging.getLogger(__name__)


def wind_form(tail: list[Expression], ev, stack) -> Step:
    frame = Wind(len(stack))
    ev.winds.append(frame)
    stack.append(frame)
    logger.debug("wind entered at depth %d (%d active)", frame.depth, len(ev.winds))
    return sequence(tail, stack)


def unwind_form(tail: list[Expression], ev, stack) -> Step:
    if len(tail) != 1:
        raise TekoSyntaxError("unwind requires exactly 1 argument: (unwind payload)")
    stack.append(Throw())
    return EVAL, tail[0]
