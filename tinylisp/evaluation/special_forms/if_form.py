from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError
from tinylisp.evaluation.special_forms.logic_forms import is_true


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if condition then else); only the chosen branch is evaluated."""
    if len(tail) != 3:
        raise LispArityError("if requires a condition, a then-expression and an else-expression")

    cond, then_expr, else_expr = tail
    if is_true(evaluate_fn(cond, env), "if"):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
