"""Operator-precedence evaluation of pre-tokenized arithmetic.

This package provides:
- Tokens: Number and Operation, with Control, Builtin and function markers
- OperatorRegistry: Arity, precedence and associativity of every operator
- FunctionTable: Registry for user functions of fixed arity
- Evaluator: Single-pass reduction of a token stream to a float
"""

from shunteval.config import EvaluatorConfig
from shunteval.errors import (
    EvalError,
    FunctionCallError,
    IllegalJoinError,
    LogicError,
    NotEnoughArgumentsError,
    UnknownFunctionError,
    UnsupportedOperatorError,
)
from shunteval.evaluator import Evaluator, evaluate
from shunteval.functions import FunctionImpl, FunctionTable, UserFunction
from shunteval.operators import (
    BUILTIN_OPS,
    CONTROL_OPS,
    Associativity,
    Op,
    OperatorRegistry,
)
from shunteval.tokens import (
    Builtin,
    Comma,
    Control,
    FunEnd,
    FunStart,
    Number,
    Operation,
    OperationKind,
    Token,
)

__all__ = [
    # Config
    "EvaluatorConfig",
    # Errors
    "EvalError",
    "FunctionCallError",
    "IllegalJoinError",
    "LogicError",
    "NotEnoughArgumentsError",
    "UnknownFunctionError",
    "UnsupportedOperatorError",
    # Evaluator
    "Evaluator",
    "evaluate",
    # Functions
    "FunctionImpl",
    "FunctionTable",
    "UserFunction",
    # Operators
    "BUILTIN_OPS",
    "CONTROL_OPS",
    "Associativity",
    "Op",
    "OperatorRegistry",
    # Tokens
    "Builtin",
    "Comma",
    "Control",
    "FunEnd",
    "FunStart",
    "Number",
    "Operation",
    "OperationKind",
    "Token",
]
