"""Registry of special forms for the lispy evaluator.

Maps names to SpecialForm values with a fixed operand count. The prelude
installs these into the root environment; the evaluator reaches them by
ordinary symbol lookup, then hands them their operands unevaluated.
"""

from lispy.types.expression import SpecialForm
from lispy.evaluation.special_forms.if_form import if_form
from lispy.evaluation.special_forms.let_form import let_form
from lispy.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "if": SpecialForm("if", 3, if_form),
    "let": SpecialForm("let", 3, let_form),
    "lambda": SpecialForm("lambda", 2, lambda_form),
}
