"""Special forms of the Egg evaluator.

Special forms receive their argument expressions unevaluated and decide for
themselves what to evaluate. The set is closed: the evaluator checks an
operator name against SPECIAL_FORMS before any variable lookup, so these
names cannot be rebound or extended at runtime.
"""

from enum import Enum
from types import MappingProxyType

from egg.evaluation.special_forms.define_form import define_form
from egg.evaluation.special_forms.do_form import do_form
from egg.evaluation.special_forms.fun_form import fun_form
from egg.evaluation.special_forms.if_form import if_form
from egg.evaluation.special_forms.set_form import set_form
from egg.evaluation.special_forms.while_form import while_form


class SpecialForm(Enum):
    IF = "if"
    WHILE = "while"
    DO = "do"
    DEFINE = "define"
    SET = "set"
    FUN = "fun"


_HANDLERS = {
    SpecialForm.IF: if_form,
    SpecialForm.WHILE: while_form,
    SpecialForm.DO: do_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.SET: set_form,
    SpecialForm.FUN: fun_form,
}

SPECIAL_FORMS = MappingProxyType({form.value: _HANDLERS[form] for form in SpecialForm})
