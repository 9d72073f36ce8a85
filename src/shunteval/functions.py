"""User function table for the shunteval evaluator.

Functions are called from token streams with FunStart(name) ... FunEnd().
Each function is registered with a fixed arity; the evaluator pops exactly
that many values and hands them to the implementation as one sequence.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from shunteval.errors import UnknownFunctionError

logger = logging.getLogger(__name__)

FunctionImpl = Callable[[Sequence[float]], float]


@dataclass(frozen=True)
class UserFunction:
    """Definition of a user function.

    Attributes:
        name: Function name as referenced by FunStart markers
        arity: Number of values consumed per call
        implementation: Callable receiving the argument values in call order
    """

    name: str
    arity: int
    implementation: FunctionImpl


class FunctionTable:
    """Name-to-definition mapping for user functions.

    Unlike a process-wide registry, each table is owned by the evaluator it
    was given to, so independent evaluators never see each other's
    functions. Registration is not synchronized; finish registering before
    sharing the table across threads.

    Example:
        table = FunctionTable()
        table.register(UserFunction("double", 1, lambda args: args[0] * 2))

        table.get("double").arity  # Returns 1
    """

    def __init__(self) -> None:
        self._functions: dict[str, UserFunction] = {}

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def register(self, func: UserFunction) -> None:
        """Register a function, replacing any prior definition of that name.

        Raises:
            ValueError: If the arity is negative
        """
        if func.arity < 0:
            raise ValueError(f"Function '{func.name}' has negative arity {func.arity}")

        if func.name in self._functions:
            logger.debug("Replacing function %s (arity %d)", func.name, func.arity)
        else:
            logger.debug("Registered function %s (arity %d)", func.name, func.arity)
        self._functions[func.name] = func

    def get(self, name: str) -> UserFunction:
        """Get a function definition by name.

        Raises:
            UnknownFunctionError: If the function is not registered
        """
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunctionError(name) from None

    def is_registered(self, name: str) -> bool:
        """Check if a function is registered."""
        return name in self._functions

    def list_all(self) -> list[UserFunction]:
        """List all registered functions."""
        return list(self._functions.values())

    def clear(self) -> None:
        """Remove every registration."""
        self._functions.clear()
