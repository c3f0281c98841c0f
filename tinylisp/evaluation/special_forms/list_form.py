from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment


def list_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> list[LispValue]:
    """(list a b ...) evaluates each argument and returns a new data list."""
    return [evaluate_fn(expr, env) for expr in tail]
