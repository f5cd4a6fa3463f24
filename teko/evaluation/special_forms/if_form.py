from teko import Expression
from teko.errors import TekoSyntaxError
from teko.evaluation.frames import EVAL, Step, Branch


def if_form(tail: list[Expression], ev, stack) -> Step:
    if len(tail) not in (2, 3):
        raise TekoSyntaxError("if requires a test, a then-expression and an optional else-expression")

    # Only false is false: (), 0 and everything else select the then-branch.
    # A missing else-branch evaluates to ().
    alternative = tail[2] if len(tail) == 3 else []
    stack.append(Branch(tail[1], alternative))
    return EVAL, tail[0]
