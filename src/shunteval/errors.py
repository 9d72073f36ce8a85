"""Exceptions raised by the shunteval evaluator.

EvalError and its subclasses reject a malformed token stream; callers are
expected to catch them. UnknownFunctionError and UnsupportedOperatorError
signal a programming error in how the evaluator is used and derive from
ValueError instead.
"""

from typing import Any


class EvalError(Exception):
    """Error during expression evaluation."""
    pass


class NotEnoughArgumentsError(EvalError):
    """An operator was reduced with fewer pending values than its arity."""

    def __init__(self, operator: Any, required: int, available: int):
        self.operator = operator
        self.required = required
        self.available = available
        super().__init__(
            f"{operator!r} requires {required} argument(s), {available} available"
        )


class LogicError(EvalError):
    """The token stream did not reduce to exactly one value."""

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(
            f"Expression must reduce to exactly one value, {remaining} remaining"
        )


class IllegalJoinError(EvalError):
    """JOIN was applied to a negative operand."""

    def __init__(self, left: float, right: float):
        self.left = left
        self.right = right
        super().__init__(f"Cannot join negative operands: {left!r}, {right!r}")


class FunctionCallError(EvalError):
    """A user function failed or returned a non-numeric value."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"Error calling {name}: {message}")


class UnknownFunctionError(ValueError):
    """A FunStart marker names a function that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function: {name}")


class UnsupportedOperatorError(ValueError):
    """An operator is disabled by the evaluator configuration."""
    pass
