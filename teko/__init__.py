# Core type aliases for Teko's data model.
# Code and data share one representation: Symbols and Python lists of
# Expressions. Runtime values add numbers, booleans, Null, strings, closures
# and error values on top of that.
#
# Naming guidance:
# - Expression: use in reader/macro code to denote syntactic forms.
# - Value:      use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Syntactic forms (Symbol | list[Expression])
Expression = Any

# Primitive function: receives the evaluator and the evaluated arguments
PrimitiveFn = Callable[..., Value]

__version__ = "0.4.0"
