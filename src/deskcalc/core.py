"""Calculator display state machine driven by keypad events."""

from __future__ import annotations

import logging

from deskcalc.exceptions import CalculatorError, ErrorKind
from deskcalc.memory import MemoryRegister, default_register
from deskcalc.operations import Operation
from deskcalc.validators import check_result, is_valid_digit, parse_operand

logger = logging.getLogger(__name__)

ZERO = "0"
ERROR_TEXT = "Error"


def format_number(value: float) -> str:
    """
    Render a number for the display.

    Integral values drop the fractional part ("8" rather than "8.0");
    everything else uses the default float text.
    """
    if value.is_integer():
        return str(int(value))
    return str(value)


class CalculatorState:
    """
    Model behind a physical-calculator style keypad.

    Each method corresponds to one key press and mutates the state in place.
    Failures never propagate to the caller: they latch the calculator into an
    error state, put a readable message on the display and keep the
    structured error in ``error``. Only ``clear`` (or ``clear_entry``) leaves
    the error state.

    Example:
        >>> calc = CalculatorState()
        >>> calc.input_digit(5)
        >>> calc.set_operation(Operation.ADD)
        >>> calc.input_digit(3)
        >>> calc.set_operation(Operation.MULTIPLY)
        >>> calc.display_value
        '8'
        >>> calc.input_digit(2)
        >>> calc.calculate()
        >>> calc.display_value
        '16'
    """

    def __init__(self, memory: MemoryRegister | None = None) -> None:
        """
        Initialize a calculator showing "0".

        Args:
            memory: Register used by the memory keys (default: the shared
                process-wide register)
        """
        self._memory = memory if memory is not None else default_register()
        self._display_value = ZERO
        self._first_operand: float | None = None
        self._current_operation = Operation.NONE
        self._clear_on_next_input = False
        self._last_pressed_operation = False
        self._error: CalculatorError | None = None

    @property
    def display_value(self) -> str:
        """Text currently shown on the display."""
        return self._display_value

    @property
    def first_operand(self) -> float | None:
        """Pending left-hand operand, if any."""
        return self._first_operand

    @property
    def current_operation(self) -> Operation:
        return self._current_operation

    @property
    def clear_on_next_input(self) -> bool:
        return self._clear_on_next_input

    @property
    def last_pressed_operation(self) -> bool:
        return self._last_pressed_operation

    @property
    def error_state(self) -> bool:
        """Whether the calculator is latched in an error."""
        return self._error is not None

    @property
    def error(self) -> CalculatorError | None:
        """The error that latched the calculator, if any."""
        return self._error

    @property
    def error_kind(self) -> ErrorKind | None:
        return self._error.kind if self._error is not None else None

    @property
    def memory(self) -> MemoryRegister:
        return self._memory

    def _latch(self, error: CalculatorError, display: str | None = None) -> None:
        """Enter the error state."""
        self._error = error
        self._display_value = display if display is not None else error.display_text()
        logger.debug("calculator error latched: %s (%s)", error, error.kind.value)

    def clear(self) -> None:
        """Reset the calculator to its initial state."""
        self._display_value = ZERO
        self._first_operand = None
        self._current_operation = Operation.NONE
        self._clear_on_next_input = False
        self._last_pressed_operation = False
        self._error = None
        logger.debug("calculator cleared")

    def clear_entry(self) -> None:
        """Clear the current entry, keeping any pending operand and operation."""
        self._display_value = ZERO
        self._clear_on_next_input = False
        self._error = None

    def input_digit(self, digit: int) -> None:
        """Enter a digit; values outside 0..9 are ignored."""
        if self.error_state or not is_valid_digit(digit):
            return

        if self._clear_on_next_input:
            self._display_value = str(digit)
            self._clear_on_next_input = False
        elif self._display_value == ZERO:
            self._display_value = str(digit)
        else:
            self._display_value += str(digit)

        self._last_pressed_operation = False

    def input_decimal(self) -> None:
        """Enter a decimal point; a second point is ignored."""
        if self.error_state:
            return

        if self._clear_on_next_input:
            self._display_value = ZERO + "."
            self._clear_on_next_input = False
        elif "." not in self._display_value:
            self._display_value += "."

        self._last_pressed_operation = False

    def toggle_sign(self) -> None:
        """Add or remove a leading minus sign; "0" is left alone."""
        if self.error_state or self._display_value == ZERO:
            return

        if self._display_value.startswith("-"):
            self._display_value = self._display_value[1:]
        else:
            self._display_value = "-" + self._display_value

    def backspace(self) -> None:
        """Delete the last character, never leaving the display empty."""
        if self.error_state:
            return

        if self._clear_on_next_input:
            self.clear_entry()
            return

        remaining = self._display_value[:-1]
        # A bare "-" is not a number.
        if remaining in ("", "-"):
            self._display_value = ZERO
        else:
            self._display_value = remaining

    def set_operation(self, operation: Operation) -> None:
        """
        Select the pending operation.

        If an operation is already pending and a number has been entered
        since, it is resolved first so that ``5 + 3 *`` shows 8 before the
        multiply starts. Pressing operators back to back only replaces the
        pending one.
        """
        if self.error_state:
            return

        try:
            parse_operand(self._display_value)
        except CalculatorError as e:
            self._latch(e, ERROR_TEXT)
            return

        if self._first_operand is not None and not self._last_pressed_operation:
            self.calculate()
            if self.error_state:
                return

        self._first_operand = parse_operand(self._display_value)
        self._current_operation = operation
        self._clear_on_next_input = True
        self._last_pressed_operation = True

    def calculate(self) -> None:
        """Resolve the pending operation against the displayed operand."""
        if self.error_state:
            return

        if self._first_operand is not None:
            try:
                second = parse_operand(self._display_value)
                result = check_result(
                    self._current_operation.apply(self._first_operand, second),
                    self._current_operation.value,
                )
            except CalculatorError as e:
                self._latch(e)
            else:
                self._display_value = format_number(result)
                self._first_operand = result

        self._current_operation = Operation.NONE
        self._clear_on_next_input = True
        self._last_pressed_operation = False

    def memory_store(self) -> None:
        """MS: store the displayed number in memory."""
        value = self._memory_operand()
        if value is not None:
            self._memory.store(value)

    def memory_add(self) -> None:
        """M+: add the displayed number to memory."""
        value = self._memory_operand()
        if value is not None:
            self._memory.add(value)

    def memory_subtract(self) -> None:
        """M-: subtract the displayed number from memory."""
        value = self._memory_operand()
        if value is not None:
            self._memory.subtract(value)

    def memory_clear(self) -> None:
        """MC: reset memory to zero."""
        if not self.error_state:
            self._memory.clear()

    def memory_recall(self) -> None:
        """MR: show the memory value; the next digit starts a new entry."""
        if self.error_state:
            return

        try:
            value = check_result(self._memory.recall(), "recall")
        except CalculatorError as e:
            self._latch(e)
            return

        self._display_value = format_number(value)
        self._clear_on_next_input = True
        self._last_pressed_operation = False

    def _memory_operand(self) -> float | None:
        """Parse the display for a memory key, latching an error on failure."""
        if self.error_state:
            return None
        try:
            return parse_operand(self._display_value)
        except CalculatorError as e:
            self._latch(e, ERROR_TEXT)
            return None

    def __repr__(self) -> str:
        return (
            f"CalculatorState(display_value={self._display_value!r}, "
            f"first_operand={self._first_operand!r}, "
            f"current_operation={self._current_operation.name}, "
            f"clear_on_next_input={self._clear_on_next_input}, "
            f"last_pressed_operation={self._last_pressed_operation}, "
            f"error_state={self.error_state})"
        )
