from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispInvalidFunctionDefinition
from tinylisp.types.lambda_fn import Lambda
from tinylisp.types.symbol import Symbol
from tinylisp.types.values import render
from tinylisp.evaluation.special_forms.lambda_form import parse_formals


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params) body)
    Binds the function in the current environment, which is also the one it
    closes over, so the body can call itself by name.
    """
    if len(tail) != 3:
        raise LispArityError("defun requires a name, a parameter list and a body")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise LispInvalidFunctionDefinition(f"invalid function name: {render(name)}")
    fn = Lambda(parse_formals(params, "defun"), body, env, name=name)
    env.define(name, fn)
    return fn
