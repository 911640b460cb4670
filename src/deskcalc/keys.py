"""Keyboard key dispatch for hosts that forward raw key names."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deskcalc.operations import Operation

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from deskcalc.core import CalculatorState

OPERATOR_KEYS = ("+", "-", "*", "×", "/", "÷")

_COMMANDS: dict[str, Callable[[CalculatorState], None]] = {
    ".": lambda state: state.input_decimal(),
    "Enter": lambda state: state.calculate(),
    "=": lambda state: state.calculate(),
    "Escape": lambda state: state.clear(),
    "Delete": lambda state: state.clear_entry(),
    "Backspace": lambda state: state.backspace(),
    "F9": lambda state: state.toggle_sign(),
    "±": lambda state: state.toggle_sign(),
}


def press_key(state: CalculatorState, key: str) -> bool:
    """
    Apply a single key press to a calculator.

    Args:
        state: The calculator receiving the key
        key: Key name as reported by the host ("7", "+", "Enter", ...)

    Returns:
        True if the key is a calculator key, False if it was ignored
    """
    if len(key) == 1 and key.isdigit() and key.isascii():
        state.input_digit(int(key))
        return True

    if key in OPERATOR_KEYS:
        state.set_operation(Operation.from_symbol(key))
        return True

    command = _COMMANDS.get(key)
    if command is None:
        return False

    command(state)
    return True


def press_keys(state: CalculatorState, keys: Iterable[str]) -> str:
    """Apply a sequence of key presses and return the resulting display text."""
    for key in keys:
        press_key(state, key)
    return state.display_value
