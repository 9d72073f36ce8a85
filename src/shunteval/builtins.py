"""Built-in operator implementations for the shunteval evaluator.

All arithmetic follows IEEE-754 double semantics: division by zero yields an
infinity (or nan for 0/0), 0 ** 0 is 1, a negative base with a fractional
exponent is nan, and overflow saturates to an infinity. Built-ins never raise
for numeric reasons; the only domain check is JOIN's non-negative operands.
"""

import math
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from shunteval.errors import IllegalJoinError
from shunteval.tokens import Builtin, Control


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and int(value) % 2 == 1


def _add(args: Sequence[float]) -> float:
    a, b = args
    return a + b


def _sub(args: Sequence[float]) -> float:
    a, b = args
    return a - b


def _mul(args: Sequence[float]) -> float:
    a, b = args
    return a * b


def _div(args: Sequence[float]) -> float:
    a, b = args
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _pow(args: Sequence[float]) -> float:
    a, b = args
    try:
        return math.pow(a, b)
    except ValueError:
        # Domain errors: zero to a negative power, negative base to a fraction
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf


def _unary_minus(args: Sequence[float]) -> float:
    (a,) = args
    return -a


def _join(args: Sequence[float]) -> float:
    """Append the right digit to the left number (4 JOIN 3 -> 43)."""
    a, b = args
    if min(a, b) < 0:
        raise IllegalJoinError(a, b)
    return a * 10 + b


BUILTIN_IMPLEMENTATIONS: Mapping[Builtin, Callable[[Sequence[float]], float]] = MappingProxyType({
    Builtin.ADD: _add,
    Builtin.SUB: _sub,
    Builtin.MUL: _mul,
    Builtin.DIV: _div,
    Builtin.POW: _pow,
    Builtin.UNARY_MINUS: _unary_minus,
})


def apply_builtin(kind: Builtin, args: Sequence[float]) -> float:
    """Apply a built-in operator to its argument values."""
    return BUILTIN_IMPLEMENTATIONS[kind](args)


def apply_control(kind: Control, args: Sequence[float]) -> float | None:
    """Apply a control marker; structural markers produce no value."""
    if kind is Control.JOIN:
        return _join(args)
    return None
