from tinylisp import EvaluatorFn, LispValue, SExpression
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispTypeError
from tinylisp.types.nil import Nil
from tinylisp.types.values import render


def is_true(val: LispValue, where: str) -> bool:
    """Truth of a condition value.

    Booleans are taken as they are and nil counts as false. Any other value
    is not a condition and raises LispTypeError.
    """
    if isinstance(val, bool):
        return val
    if val is Nil:
        return False
    raise LispTypeError(f"{where} expects a boolean condition, got {render(val)}")


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns false as
    soon as one is false. If all operands are true, returns true. With zero
    operands, returns true.
    """
    for expr in tail:
        if not is_true(evaluate_fn(expr, env), "and"):
            return False
    return True


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns true as
    soon as one is true. If none are, returns false.
    """
    for expr in tail:
        if is_true(evaluate_fn(expr, env), "or"):
            return True
    return False


def not_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> bool:
    if len(tail) != 1:
        raise LispArityError("not requires exactly 1 argument")
    return not is_true(evaluate_fn(tail[0], env), "not")
