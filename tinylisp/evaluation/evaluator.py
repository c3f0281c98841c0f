"""Core evaluator for the tinylisp interpreter.

Dispatches special forms, builtins and user-defined functions. Evaluation is
plain Python recursion: deep non-tail recursion in Lisp code can exhaust the
host stack, which surfaces as RecursionError rather than a LispError.
"""

from __future__ import annotations

from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispNotCallable
from tinylisp.types.lambda_fn import Lambda
from tinylisp.types.symbol import Symbol
from tinylisp.types.values import render
from tinylisp.evaluation.apply import apply_lambda
from tinylisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            return []

        case [Symbol() as head, *tail]:
            # --- Special forms handling ---
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(tail, env, evaluate)

            fn = env.lookup(head)
            if isinstance(fn, Lambda):
                return apply_lambda(fn, tail, env, evaluate)
            if callable(fn):
                args = [evaluate(arg, env) for arg in tail]
                return fn(env, args)
            raise LispNotCallable(f"{head} is not a function: {render(fn)}")

        case [head, *_]:
            raise LispNotCallable(f"invalid function call: {render(head)}")

    # --- Atoms return as-is ---
    return expr
