from teko import Expression
from teko.errors import TekoSyntaxError
from teko.evaluation.frames import RETURN, Step
from teko.types.closure import Function, Macro
from teko.types.symbol import Symbol


def fn_form(tail: list[Expression], ev, stack) -> Step:
    """(fn (params...) body...) => Function. An empty body returns ()."""
    if not tail:
        raise TekoSyntaxError("fn requires a parameter list")

    params = tail[0]
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise TekoSyntaxError("fn parameter list must be a list of symbols")

    return RETURN, Function(list(params), list(tail[1:]))


def mo_form(tail: list[Expression], ev, stack) -> Step:
    """(mo param body...) => Macro. param receives the raw argument list."""
    if not tail:
        raise TekoSyntaxError("mo requires a parameter symbol")

    param = tail[0]
    if not isinstance(param, Symbol):
        raise TekoSyntaxError("mo parameter must be a single symbol")

    return RETURN, Macro(param, list(tail[1:]))
