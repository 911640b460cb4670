"""
Four-function desk calculator.

Provides:
- Arithmetic primitives with divide-by-zero detection
- A memory register (M+/M-/MR/MC/MS)
- A keypad-driven display state machine with operator chaining
"""

import logging

from deskcalc.core import CalculatorState, format_number
from deskcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    ErrorKind,
    InvalidInputError,
    OverflowError,
    UnderflowError,
    error_from_message,
)
from deskcalc.keys import press_key, press_keys
from deskcalc.memory import (
    MemoryRegister,
    default_register,
    memory_add,
    memory_clear,
    memory_recall,
    memory_store,
    memory_subtract,
)
from deskcalc.operations import Operation, add, divide, multiply, subtract
from deskcalc.validators import check_result, is_valid_digit, parse_operand

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalculatorError",
    "CalculatorState",
    "DivisionByZeroError",
    "ErrorKind",
    "InvalidInputError",
    "MemoryRegister",
    "Operation",
    "OverflowError",
    "UnderflowError",
    "add",
    "check_result",
    "default_register",
    "divide",
    "error_from_message",
    "format_number",
    "is_valid_digit",
    "memory_add",
    "memory_clear",
    "memory_recall",
    "memory_store",
    "memory_subtract",
    "multiply",
    "parse_operand",
    "press_key",
    "press_keys",
    "subtract",
]

__version__ = "0.1.0"
