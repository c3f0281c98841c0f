from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispInvalidFunctionDefinition
from tinylisp.types.lambda_fn import Lambda
from tinylisp.types.symbol import Symbol
from tinylisp.types.values import render


def parse_formals(params: SExpression, where: str) -> list[Symbol]:
    """Validate a parameter list: a list of distinct atoms."""
    if not isinstance(params, list):
        raise LispInvalidFunctionDefinition(f"invalid {where} parameters: {render(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispInvalidFunctionDefinition(f"invalid parameter name: {render(p)}")
    if len(set(params)) != len(params):
        raise LispInvalidFunctionDefinition(f"duplicate parameter in {render(params)}")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (params) body) -> anonymous function closing over `env`."""
    if len(tail) != 2:
        raise LispArityError("lambda requires a parameter list and a body")

    params, body = tail
    return Lambda(parse_formals(params, "lambda"), body, env)
