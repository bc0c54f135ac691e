"""Registry of special forms for the Egg evaluator.

Maps keyword names to handler functions that receive their arguments as
unevaluated expressions. The evaluator consults this table before ordinary
function application. The table is read-only; build a new mapping with
`make_special_forms` to add or replace forms.
"""

from types import MappingProxyType
from typing import Callable, Mapping

from egg.evaluation.special_forms.if_form import if_form
from egg.evaluation.special_forms.while_form import while_form
from egg.evaluation.special_forms.do_form import do_form
from egg.evaluation.special_forms.define_form import define_form
from egg.evaluation.special_forms.set_form import set_form
from egg.evaluation.special_forms.fun_form import fun_form

SpecialForm = Callable[..., object]

_CORE_FORMS: dict[str, SpecialForm] = {
    "if": if_form,
    "while": while_form,
    "do": do_form,
    "define": define_form,
    "set": set_form,
    "fun": fun_form,
}


def make_special_forms(extra: Mapping[str, SpecialForm] | None = None) -> Mapping[str, SpecialForm]:
    """Return a fresh read-only table of the core forms plus any `extra` ones."""
    forms = dict(_CORE_FORMS)
    if extra:
        forms.update(extra)
    return MappingProxyType(forms)


SPECIAL_FORMS = make_special_forms()
