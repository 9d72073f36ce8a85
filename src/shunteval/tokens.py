"""Token shapes accepted by the shunteval evaluator.

Tokens are produced by the caller (there is no text lexer). A token stream is
a flat sequence of:
- Number: a float operand
- Operation: an operator or marker, wrapping one of the operation kinds

Operation kinds fall into three families:
- Control: END_EXPR, OPEN_BRACKET, CLOSE_BRACKET, JOIN
- Builtin: ADD, SUB, MUL, DIV, POW, UNARY_MINUS
- User function markers: FunStart(name), FunEnd(), Comma()
"""

from dataclasses import dataclass
from enum import Enum, auto


class Control(Enum):
    """Structural markers that shape the reduction order."""

    END_EXPR = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    JOIN = auto()           # legacy digit concatenation, disabled by default


class Builtin(Enum):
    """Built-in arithmetic operators."""

    ADD = auto()            # +
    SUB = auto()            # -
    MUL = auto()            # *
    DIV = auto()            # /
    POW = auto()            # ^
    UNARY_MINUS = auto()    # -x


@dataclass(frozen=True)
class FunStart:
    """Opens a call to the registered function `name`."""

    name: str


@dataclass(frozen=True)
class FunEnd:
    """Closes a function call."""


@dataclass(frozen=True)
class Comma:
    """Separates function call arguments."""


OperationKind = Control | Builtin | FunStart | FunEnd | Comma


@dataclass(frozen=True)
class Number:
    """A numeric operand."""

    value: float

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


@dataclass(frozen=True)
class Operation:
    """An operator or marker token."""

    kind: OperationKind

    def __repr__(self) -> str:
        kind = self.kind
        if isinstance(kind, Enum):
            return f"Operation({kind.name})"
        return f"Operation({kind!r})"


Token = Number | Operation
