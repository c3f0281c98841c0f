"""Application of user-defined functions.

Argument expressions are evaluated in the caller's environment before any
binding happens; the body then runs in a fresh frame chained to the
function's captured environment.
"""

from tinylisp import EvaluatorFn, LispValue, SExpression
from tinylisp.types.environment import Environment
from tinylisp.types.lambda_fn import Lambda


def apply_lambda(
    fn: Lambda,
    arg_exprs: list[SExpression],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `arg_exprs` in `caller_env` and call `fn` with the results."""
    # Arity is checked before any argument is evaluated
    fn.check_arity(len(arg_exprs))
    args = [evaluate_fn(arg, caller_env) for arg in arg_exprs]
    return call_lambda(fn, args, evaluate_fn)


def call_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Call `fn` with already-evaluated arguments."""
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)
