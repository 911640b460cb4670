"""Unit tests for keyboard key dispatch."""

import pytest

from deskcalc import Operation, press_key, press_keys


class TestPressKey:
    """Tests for press_key."""

    @pytest.mark.parametrize("key", list("0123456789"))
    def test_digit_keys(self, calculator, key):
        assert press_key(calculator, key) is True
        assert calculator.display_value == key

    def test_decimal_key(self, calculator):
        press_key(calculator, ".")
        assert calculator.display_value == "0."

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("+", Operation.ADD),
            ("-", Operation.SUBTRACT),
            ("*", Operation.MULTIPLY),
            ("×", Operation.MULTIPLY),
            ("/", Operation.DIVIDE),
            ("÷", Operation.DIVIDE),
        ],
    )
    def test_operator_keys(self, calculator, key, expected):
        press_key(calculator, "4")
        assert press_key(calculator, key) is True
        assert calculator.current_operation is expected

    @pytest.mark.parametrize("key", ["Enter", "="])
    def test_equals_keys(self, calculator, key):
        press_keys(calculator, "2+2")
        press_key(calculator, key)
        assert calculator.display_value == "4"

    def test_escape_clears(self, calculator):
        press_keys(calculator, "5+3")
        press_key(calculator, "Escape")
        assert calculator.display_value == "0"
        assert calculator.first_operand is None

    def test_delete_clears_entry(self, calculator):
        press_keys(calculator, "5+3")
        press_key(calculator, "Delete")
        assert calculator.display_value == "0"
        assert calculator.current_operation is Operation.ADD

    def test_backspace_key(self, calculator):
        press_keys(calculator, "123")
        press_key(calculator, "Backspace")
        assert calculator.display_value == "12"

    @pytest.mark.parametrize("key", ["F9", "±"])
    def test_sign_keys(self, calculator, key):
        press_key(calculator, "7")
        press_key(calculator, key)
        assert calculator.display_value == "-7"

    @pytest.mark.parametrize("key", ["a", "Shift", "%", "", "12", "٣"])
    def test_unknown_keys_are_ignored(self, calculator, key):
        press_key(calculator, "8")
        assert press_key(calculator, key) is False
        assert calculator.display_value == "8"


class TestPressKeys:
    """Tests for press_keys."""

    def test_chained_sequence(self, calculator):
        assert press_keys(calculator, "5+3*2=") == "16"

    def test_division_by_zero_then_recover(self, calculator):
        assert press_keys(calculator, "5/0=").startswith("Error")
        assert press_keys(calculator, "9").startswith("Error")
        assert press_keys(calculator, ["Escape", "7", "+", "3", "Enter"]) == "10"

    def test_decimal_sequence(self, calculator):
        assert press_keys(calculator, "1.5*2=") == "3"
