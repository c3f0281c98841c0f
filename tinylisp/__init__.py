# Core type aliases for tinylisp's data model.
# We use plain Python types (int, float, str, bool, list) plus Symbol, Nil and
# Lambda to represent both code (forms) and runtime values. A call form and a
# data list built by `list` share the same Python list representation.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]
