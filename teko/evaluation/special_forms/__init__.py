"""Registry of special forms for the Teko evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary application. A handler takes
(tail, evaluator, stack) and returns the next step for the evaluation loop,
pushing whatever frames it needs to finish the form later.
"""

from teko.types.symbol import Symbol
from teko.evaluation.special_forms.define_form import define_form
from teko.evaluation.special_forms.set_form import set_form
from teko.evaluation.special_forms.fn_form import fn_form, mo_form
from teko.evaluation.special_forms.if_form import if_form
from teko.evaluation.special_forms.wind_forms import wind_form, unwind_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("fn"): fn_form,
    Symbol("mo"): mo_form,
    Symbol("if"): if_form,
    Symbol("wind"): wind_form,
    Symbol("unwind"): unwind_form,
}
