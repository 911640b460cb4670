"""Core arithmetic operations and the operator keys that select them."""

from collections.abc import Callable
from enum import Enum

from deskcalc.exceptions import DivisionByZeroError, InvalidInputError


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Infinities and NaN follow IEEE-754; no overflow guard is applied.
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for finite a != 0)

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero (positive or negative)
    """
    if b == 0.0:
        raise DivisionByZeroError(a)

    return a / b


class Operation(Enum):
    """Pending binary operation selected by an operator key."""

    NONE = "none"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operation":
        """
        Map an operator key symbol to an Operation.

        Raises:
            InvalidInputError: If the symbol is not an operator key
        """
        try:
            return _SYMBOLS[symbol]
        except KeyError:
            raise InvalidInputError(symbol, f"Unknown operation: {symbol}") from None

    def apply(self, a: float, b: float) -> float:
        """Apply this operation to (a, b); NONE passes b through."""
        if self is Operation.NONE:
            return b
        return _FUNCTIONS[self](a, b)


_FUNCTIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}

_SYMBOLS: dict[str, Operation] = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "×": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "÷": Operation.DIVIDE,
}
