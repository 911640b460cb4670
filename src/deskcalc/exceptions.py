"""Custom exceptions for the calculator package."""

from enum import Enum
from typing import Any

DIVISION_BY_ZERO_MESSAGE = "Division by zero is not allowed"
INVALID_INPUT_MESSAGE = "Invalid input"


class ErrorKind(Enum):
    """Failure categories shared by the arithmetic layer and the state machine."""

    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_INPUT = "invalid_input"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    CALCULATION_ERROR = "calculation_error"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    kind = ErrorKind.CALCULATION_ERROR

    def __init__(self, message: str, value: Any = None, kind: ErrorKind | None = None) -> None:
        self.message = message
        self.value = value
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message

    def display_text(self) -> str:
        """Text shown on the calculator display while this error is latched."""
        return f"Error: {self.message}"


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: float | None = None) -> None:
        super().__init__(DIVISION_BY_ZERO_MESSAGE, numerator)
        self.numerator = numerator


class OverflowError(CalculatorError):
    """Raised when a calculation results in overflow."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__("Overflow", operands)
        self.operation = operation
        self.operands = operands


class UnderflowError(CalculatorError):
    """Raised when a result is too small to represent."""

    kind = ErrorKind.UNDERFLOW

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__("Result is too small to represent", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (unparseable, NaN, Inf, wrong type)."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, value: Any, reason: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(reason, value)
        self.reason = reason


def error_from_message(message: str) -> CalculatorError:
    """
    Rebuild a structured error from a plain message string.

    Hosts that only kept the text of an error (for example from an older
    binding that returned strings) can recover its kind this way.

    Args:
        message: The error message

    Returns:
        A CalculatorError subclass instance matching the message
    """
    if message == DIVISION_BY_ZERO_MESSAGE:
        return DivisionByZeroError()
    if message.startswith(INVALID_INPUT_MESSAGE):
        details = message[len(INVALID_INPUT_MESSAGE) :].lstrip(": ")
        if details:
            return InvalidInputError(details, f"{INVALID_INPUT_MESSAGE}: {details}")
        return InvalidInputError(None)
    return CalculatorError(message)
