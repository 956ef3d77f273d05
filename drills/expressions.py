"""Arithmetic expression trees and their evaluation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence, Union


class Operation(enum.Enum):
    """An operation to perform on two subexpressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Value:
    """A literal integer value."""

    value: int


@dataclass(frozen=True)
class Op:
    """An operation on two subexpressions."""

    op: Operation
    left: Expression
    right: Expression


Expression = Union[Op, Value]


class EvaluationError(ArithmeticError):
    """Raised when an expression cannot be evaluated."""


def _divide(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: Expression) -> int:
    """Evaluate an expression tree to an integer."""
    match expression:
        case Value(value):
            return value
        case Op(op, left, right):
            lhs = evaluate(left)
            rhs = evaluate(right)
            match op:
                case Operation.ADD:
                    return lhs + rhs
                case Operation.SUB:
                    return lhs - rhs
                case Operation.MUL:
                    return lhs * rhs
                case Operation.DIV:
                    if rhs == 0:
                        raise EvaluationError("division by zero")
                    return _divide(lhs, rhs)
    raise TypeError(f"not an expression: {expression!r}")


def main(argv: Sequence[str] | None = None) -> None:
    """Evaluate and print a sample expression."""
    expr = Op(Operation.SUB, Value(20), Value(10))
    print(f"expr: {expr!r}")
    try:
        print(f"result: {evaluate(expr)}")
    except EvaluationError as error:
        print(f"error: {error}")


if __name__ == "__main__":
    main()