from teko import Expression
from teko.errors import TekoSyntaxError
from teko.types.symbol import Symbol

NULL_SYMBOL = Symbol("()")


def binding_name(target: Expression, form: str) -> Symbol:
    """Validate the target of a binding form. `()` names the Null constant."""
    if isinstance(target, Symbol):
        return target
    if target == []:
        return NULL_SYMBOL
    raise TekoSyntaxError(f"{form} target must be a symbol, got a list")
