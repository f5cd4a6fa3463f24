from teko import Expression
from teko.errors import TekoSyntaxError
from teko.evaluation.frames import EVAL, Step, Assign
from teko.evaluation.special_forms.names import binding_name


def set_form(tail: list[Expression], ev, stack) -> Step:
    if len(tail) != 2:
        raise TekoSyntaxError("set! requires exactly 2 arguments: (set! name expr)")
    name = binding_name(tail[0], "set!")
    stack.append(Assign(name))
    return EVAL, tail[1]
