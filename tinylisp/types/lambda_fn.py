"""Function values created by defun and lambda."""

from __future__ import annotations

from io import StringIO

from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol
from tinylisp.types.errors import LispArityError


class Lambda:
    """A first-class function with formal parameters, body, and closure env.

    `name` is set for functions created by defun and None for lambdas.
    """

    __slots__ = ("name", "formals", "body", "env")

    def __init__(
        self,
        formals: list[Symbol],
        body: SExpression,
        env: Environment,
        name: Symbol | None = None,
    ):
        self.name: Symbol | None = name
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        if self.name is not None:
            return self.name.id.upper()
        return "FUNCTION"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ")
            if self.name is not None:
                buffer.write(f" {self.name}")
            buffer.write(" (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def check_arity(self, provided: int) -> None:
        if provided != len(self.formals):
            raise LispArityError(
                f"wrong number of arguments to {self.name or 'lambda'}: "
                f"expected {len(self.formals)}, got {provided}"
            )

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this function's formal parameters
        and return a new Environment, chained to the closure, for the body.
        """
        self.check_arity(len(args))
        return self.env.child_with(dict(zip(self.formals, args)))
