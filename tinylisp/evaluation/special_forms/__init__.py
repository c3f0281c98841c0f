"""Registry of special forms for the tinylisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Handlers receive the unevaluated argument expressions, the current environment
and the evaluator, and decide themselves what to evaluate. The evaluator
consults this table before looking the head up as a function, so these names
cannot be shadowed by user definitions.
"""

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.define_form import defun_form
from tinylisp.evaluation.special_forms.lambda_form import lambda_form
from tinylisp.evaluation.special_forms.let_form import let_form
from tinylisp.evaluation.special_forms.logic_forms import and_form, or_form, not_form
from tinylisp.evaluation.special_forms.list_form import list_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("defun"): defun_form,
    Symbol("lambda"): lambda_form,
    Symbol("let"): let_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("not"): not_form,
    Symbol("list"): list_form,
}
