"""Registry of special forms for the cadr evaluator.

Maps names to handler functions that implement non-standard evaluation rules.
Each handler receives the unevaluated operand chain and the current
environment. cadr.builtin.env_builtin wraps them as SpecialForm nodes in the
root frame.
"""

from cadr.evaluation.special_forms.cond_form import cond_form
from cadr.evaluation.special_forms.define_form import define_form
from cadr.evaluation.special_forms.if_form import if_form
from cadr.evaluation.special_forms.lambda_form import lambda_form
from cadr.evaluation.special_forms.let_form import let_form
from cadr.evaluation.special_forms.logic_forms import and_form, or_form
from cadr.evaluation.special_forms.quote_forms import quote_form
from cadr.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    "define": define_form,
    "if": if_form,
    "lambda": lambda_form,
    "let": let_form,
    "cond": cond_form,
    "and": and_form,
    "or": or_form,
    "quote": quote_form,
    "set!": set_form,
}
