"""Operator metadata for the shunteval evaluator.

Every operation kind resolves to an Op record (arity, precedence,
associativity). Higher precedence binds tighter:

    END_EXPR(0) < OPEN/CLOSE_BRACKET(1) = FunStart(1) < ADD/SUB(2)
    < MUL/DIV(3) < POW(4) < UNARY_MINUS(5) < JOIN(6) < FunEnd/Comma(7)

These values decide when the reduction loop unwinds and must not change.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from shunteval.config import EvaluatorConfig
from shunteval.errors import UnsupportedOperatorError
from shunteval.functions import FunctionTable
from shunteval.tokens import Builtin, Comma, Control, FunEnd, FunStart, OperationKind


class Associativity(Enum):
    """Tie-break rule between operators of equal precedence."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Op:
    """Fixed metadata of one operator identity."""

    arity: int
    precedence: int
    associativity: Associativity = Associativity.LEFT


FUN_START_PRECEDENCE = 1
BARRIER_PRECEDENCE = 7

CONTROL_OPS: Mapping[Control, Op] = MappingProxyType({
    Control.END_EXPR: Op(0, 0),
    Control.OPEN_BRACKET: Op(0, 1),
    Control.CLOSE_BRACKET: Op(0, 1),
    Control.JOIN: Op(2, 6),
})

BUILTIN_OPS: Mapping[Builtin, Op] = MappingProxyType({
    Builtin.ADD: Op(2, 2),
    Builtin.SUB: Op(2, 2),
    Builtin.MUL: Op(2, 3),
    Builtin.DIV: Op(2, 3),
    Builtin.POW: Op(2, 4, Associativity.RIGHT),
    Builtin.UNARY_MINUS: Op(1, 5, Associativity.RIGHT),
})

# FunEnd and Comma unwind everything pending inside the call but stop at FunStart
BARRIER_OP = Op(0, BARRIER_PRECEDENCE)


class OperatorRegistry:
    """Resolves operation kinds to their metadata.

    Built-in and control metadata is static; FunStart arity comes from the
    function table the registry was built with, so registrations made after
    construction are visible to later lookups.
    """

    def __init__(self, functions: FunctionTable, config: EvaluatorConfig | None = None):
        self.functions = functions
        self.config = config or EvaluatorConfig()

    def lookup(self, kind: OperationKind) -> Op:
        """Return the metadata for an operation kind.

        Raises:
            UnknownFunctionError: FunStart names an unregistered function
            UnsupportedOperatorError: JOIN is used while disabled
            TypeError: kind is not an operation kind
        """
        if isinstance(kind, Builtin):
            return BUILTIN_OPS[kind]

        if isinstance(kind, Control):
            if kind is Control.JOIN and not self.config.enable_join:
                raise UnsupportedOperatorError(
                    "JOIN is disabled; set enable_join to accept it"
                )
            return CONTROL_OPS[kind]

        if isinstance(kind, FunStart):
            arity = self.functions.get(kind.name).arity
            return Op(arity, FUN_START_PRECEDENCE)

        if isinstance(kind, (FunEnd, Comma)):
            return BARRIER_OP

        raise TypeError(f"Not an operation kind: {kind!r}")
