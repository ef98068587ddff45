"""Registry of special forms for the tinylisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table, keyed by the literal head symbol, before
ordinary function application.

Each handler is called as `handler(tail, env, evaluate_fn)` where `tail` holds
the unevaluated operands.
"""

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.quote_form import quote_form
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.define_form import define_form
from tinylisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("def"): define_form,
    Symbol("fn"): lambda_form,
}
