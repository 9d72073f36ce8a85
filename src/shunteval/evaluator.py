"""Evaluator for shunteval token streams.

Reduces a token stream to a single float in one left-to-right pass using two
stacks: pending values and pending operators. No parse tree is built.

For each Operation token, pending operators are reduced while they bind at
least as tightly as the incoming one (a pending right-associative operator of
equal precedence is left alone), then the incoming operator is pushed.
"""

import logging
from numbers import Real
from typing import Iterable

from shunteval.builtins import apply_builtin, apply_control
from shunteval.config import EvaluatorConfig
from shunteval.errors import (
    EvalError,
    FunctionCallError,
    LogicError,
    NotEnoughArgumentsError,
)
from shunteval.functions import FunctionImpl, FunctionTable, UserFunction
from shunteval.operators import Associativity, Op, OperatorRegistry
from shunteval.tokens import Builtin, Control, FunStart, Number, Operation, OperationKind, Token

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates token streams against a table of user functions.

    Usage:
        evaluator = Evaluator()
        evaluator.add_function("double", 1, lambda args: args[0] * 2)
        result = evaluator.evaluate([
            Operation(FunStart("double")),
            Number(7.0),
            Operation(FunEnd()),
            Operation(Control.END_EXPR),
        ])
        # result = 14.0

    An evaluator keeps no state between calls other than its function
    table, so it may be shared across threads once registration is done.
    """

    def __init__(
        self,
        functions: FunctionTable | None = None,
        config: EvaluatorConfig | None = None,
    ):
        self.functions = functions if functions is not None else FunctionTable()
        self.config = config or EvaluatorConfig()
        self.registry = OperatorRegistry(self.functions, self.config)

    def add_function(
        self,
        name: str,
        arity: int,
        implementation: FunctionImpl,
    ) -> None:
        """Register a user function, replacing any previous one of that name."""
        self.functions.register(UserFunction(name, arity, implementation))

    def evaluate(self, tokens: Iterable[Token]) -> float:
        """Reduce a token stream to its value.

        Raises:
            NotEnoughArgumentsError: An operator had too few pending values
            LogicError: The stream did not reduce to exactly one value
            IllegalJoinError: JOIN was applied to a negative operand
            FunctionCallError: A user function failed
            UnknownFunctionError: FunStart names an unregistered function
        """
        numbers: list[float] = []
        operators: list[tuple[OperationKind, Op]] = []
        args: list[float] = []

        try:
            for token in tokens:
                if isinstance(token, Number):
                    numbers.append(float(token.value))
                    continue

                if not isinstance(token, Operation):
                    raise TypeError(f"Not a token: {token!r}")

                op = token.kind
                op_info = self.registry.lookup(op)

                while operators:
                    prev, prev_info = operators[-1]

                    if op_info.precedence > prev_info.precedence:
                        break
                    if (
                        prev_info.associativity is Associativity.RIGHT
                        and op_info.precedence == prev_info.precedence
                    ):
                        break

                    arity = prev_info.arity
                    if len(numbers) < arity:
                        raise NotEnoughArgumentsError(prev, arity, len(numbers))

                    args.clear()
                    if arity:
                        args.extend(numbers[-arity:])
                        del numbers[-arity:]

                    result = self._apply(prev, args)
                    if result is not None:
                        numbers.append(result)

                    operators.pop()

                operators.append((op, op_info))

            if len(numbers) != 1:
                raise LogicError(len(numbers))
        except EvalError as e:
            logger.debug("Rejected token stream: %s", e)
            raise

        return numbers[0]

    eval = evaluate

    def _apply(self, kind: OperationKind, args: list[float]) -> float | None:
        """Apply a reduced operator; structural markers return None."""
        if isinstance(kind, Builtin):
            return apply_builtin(kind, args)
        if isinstance(kind, Control):
            return apply_control(kind, args)
        if isinstance(kind, FunStart):
            return self._call_function(kind.name, args)
        return None

    def _call_function(self, name: str, args: list[float]) -> float:
        """Call a user function with a copy of its argument values."""
        func = self.functions.get(name)

        try:
            result = func.implementation(list(args))
        except Exception as e:
            logger.warning("User function %s raised %s", name, type(e).__name__)
            raise FunctionCallError(name, str(e)) from e

        if isinstance(result, bool) or not isinstance(result, Real):
            raise FunctionCallError(name, f"returned non-numeric value {result!r}")
        return float(result)


# -----------------------------------------------------------------------------
# Convenience functions
# -----------------------------------------------------------------------------


def evaluate(
    tokens: Iterable[Token],
    functions: FunctionTable | None = None,
    config: EvaluatorConfig | None = None,
) -> float:
    """Evaluate a token stream with a throwaway evaluator.

    Example:
        result = evaluate([
            Number(2.0),
            Operation(Builtin.POW),
            Number(3.0),
            Operation(Control.END_EXPR),
        ])
        # result = 8.0
    """
    return Evaluator(functions, config).evaluate(tokens)
