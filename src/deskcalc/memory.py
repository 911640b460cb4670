"""Memory register backing the M+/M-/MR/MC/MS keys."""

import logging
import threading

logger = logging.getLogger(__name__)


class MemoryRegister:
    """
    A single numeric memory cell.

    All access goes through one lock, so add/subtract are atomic even when a
    host shares the register between threads.

    Example:
        >>> register = MemoryRegister()
        >>> register.store(10)
        >>> register.subtract(3)
        >>> register.recall()
        7.0
    """

    def __init__(self) -> None:
        self._value = 0.0
        self._lock = threading.Lock()

    def store(self, value: float) -> None:
        """Overwrite the register with value."""
        with self._lock:
            self._value = float(value)
        logger.debug("memory store %r", value)

    def recall(self) -> float:
        """Return the current register value."""
        with self._lock:
            return self._value

    def clear(self) -> None:
        """Reset the register to zero."""
        with self._lock:
            self._value = 0.0
        logger.debug("memory clear")

    def add(self, value: float) -> None:
        """Add value to the register."""
        with self._lock:
            self._value += value
        logger.debug("memory add %r", value)

    def subtract(self, value: float) -> None:
        """Subtract value from the register."""
        with self._lock:
            self._value -= value
        logger.debug("memory subtract %r", value)

    def __repr__(self) -> str:
        return f"MemoryRegister(value={self.recall()})"


_default_register = MemoryRegister()


def default_register() -> MemoryRegister:
    """The process-wide register shared by calculators that are not given one."""
    return _default_register


def memory_store(value: float) -> None:
    _default_register.store(value)


def memory_recall() -> float:
    return _default_register.recall()


def memory_clear() -> None:
    _default_register.clear()


def memory_add(value: float) -> None:
    _default_register.add(value)


def memory_subtract(value: float) -> None:
    _default_register.subtract(value)
