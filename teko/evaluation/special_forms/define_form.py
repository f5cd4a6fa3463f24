from teko import Expression
from teko.errors import TekoSyntaxError
from teko.evaluation.frames import EVAL, Step, Define
from teko.evaluation.special_forms.names import binding_name


def define_form(tail: list[Expression], ev, stack) -> Step:
    """
    (define name expr)
    Evaluates expr, then creates a fresh binding for name. Fails with
    DuplicateDefinition if name is already bound.
    """
    if len(tail) != 2:
        raise TekoSyntaxError("define requires exactly 2 arguments: (define name expr)")

    name = binding_name(tail[0], "define")
    stack.append(Define(name))
    return EVAL, tail[1]
