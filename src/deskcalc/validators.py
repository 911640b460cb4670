"""Input validation for display text, digits and computed results."""

import math

from deskcalc.exceptions import CalculatorError, InvalidInputError, OverflowError

MIN_DIGIT = 0
MAX_DIGIT = 9


def is_valid_digit(digit: int) -> bool:
    """
    Check whether a value is a single decimal digit.

    Out-of-range digits are ignored by the state machine rather than
    rejected, so this returns a flag instead of raising.

    Args:
        digit: The candidate digit

    Returns:
        True if digit is an int in 0..9
    """
    if isinstance(digit, bool) or not isinstance(digit, int):
        return False
    return MIN_DIGIT <= digit <= MAX_DIGIT


def parse_operand(text: str) -> float:
    """
    Parse display text as a finite float.

    Args:
        text: The display text to parse

    Returns:
        The parsed value

    Raises:
        InvalidInputError: If text is not a number, or is NaN or infinite
    """
    try:
        value = float(text)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(text) from e

    if not math.isfinite(value):
        raise InvalidInputError(text)

    return value


def check_result(value: float, operation: str = "calculation") -> float:
    """
    Validate that a computed result can be shown on the display.

    Args:
        value: The computed result
        operation: Name of the operation, for error context

    Returns:
        The validated value

    Raises:
        OverflowError: If value is infinite
        CalculatorError: If value is NaN
    """
    if math.isinf(value):
        raise OverflowError(operation, value)
    if math.isnan(value):
        raise CalculatorError("Invalid operation")
    return value
