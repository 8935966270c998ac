"""
Thread-safe 32-bit integer calculator.

A ``Calculator`` owns a single signed 32-bit register guarded by a lock.
Every mutator computes the exact result first and only commits it when it
fits in the register, so a failed operation leaves the value untouched.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from .errors import DivisionByZeroError, IntegerOverflowError

__all__ = ["INT32_MIN", "INT32_MAX", "OPERATIONS", "Calculator"]

logger = logging.getLogger(__name__)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# Operation names accepted by Calculator.apply()
OPERATIONS = ("add", "subtract", "multiply", "divide")


def _check_i32(value: int, label: str) -> int:
    """Reject anything that would not cross a 32-bit integer boundary."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be an int, got {type(value).__name__}")
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"{label} {value} is outside the 32-bit signed range")
    return value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class Calculator:
    """A mutable 32-bit register with checked arithmetic.

    Safe to share between threads: each operation holds the lock for its
    own read-modify-write only.

    Example::

        calc = Calculator(0)
        calc.add(5)
        assert calc.get_value() == 5
    """

    def __init__(self, initial_value: int) -> None:
        self._value = _check_i32(initial_value, "initial value")
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Calculator(value={self.get_value()})"

    # -- mutators -------------------------------------------------------------

    def reset(self, new_value: int) -> None:
        _check_i32(new_value, "new value")
        with self._lock:
            self._value = new_value
        logger.debug("reset -> %d", new_value)

    def add(self, x: int) -> None:
        self._apply("+", x, lambda a, b: a + b)

    def subtract(self, x: int) -> None:
        self._apply("-", x, lambda a, b: a - b)

    def multiply(self, x: int) -> None:
        self._apply("*", x, lambda a, b: a * b)

    def divide(self, x: int) -> None:
        """Divide the register by *x*, truncating toward zero.

        Raises:
            DivisionByZeroError: If *x* is 0.
            IntegerOverflowError: For ``INT32_MIN / -1``.
        """
        _check_i32(x, "operand")
        if x == 0:
            raise DivisionByZeroError()
        self._apply("/", x, _trunc_div)

    def apply(self, operation: str, x: int) -> None:
        """Apply a mutator by name (one of ``OPERATIONS``)."""
        if operation not in OPERATIONS:
            raise ValueError(
                f"Unknown operation {operation!r} — expected one of: {', '.join(OPERATIONS)}"
            )
        getattr(self, operation)(x)

    # -- reader ---------------------------------------------------------------

    def get_value(self) -> int:
        with self._lock:
            return self._value

    # -- internals ------------------------------------------------------------

    def _apply(self, symbol: str, x: int, op: Callable[[int, int], int]) -> None:
        _check_i32(x, "operand")
        with self._lock:
            current = self._value
            result = op(current, x)
            if not INT32_MIN <= result <= INT32_MAX:
                raise IntegerOverflowError(symbol, current, x)
            self._value = result
        logger.debug("%d %s %d -> %d", current, symbol, x, result)
