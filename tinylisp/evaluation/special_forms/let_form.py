from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispInvalidLetBinding
from tinylisp.types.symbol import Symbol
from tinylisp.types.values import render


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name expr) ...) body)
    Bindings are sequential: each expr already sees the names bound before it.
    """
    if len(tail) != 2:
        raise LispArityError("let requires a binding list and a body")

    bindings, body = tail
    if not isinstance(bindings, list):
        raise LispInvalidLetBinding(f"invalid let bindings: {render(bindings)}")

    local_env = env.child_with()
    for binding in bindings:
        if not isinstance(binding, list) or len(binding) != 2:
            raise LispInvalidLetBinding(f"invalid let binding: {render(binding)}")
        name, expr = binding
        if not isinstance(name, Symbol):
            raise LispInvalidLetBinding(f"invalid let binding key: {render(name)}")
        local_env.define(name, evaluate_fn(expr, local_env))
    return evaluate_fn(body, local_env)
