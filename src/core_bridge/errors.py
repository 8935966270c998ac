"""
Error taxonomy shared by the calculator and the JWT decoder.

Both families are closed: every failure surfaced by the core is one of the
kinds listed in ``ArithmeticErrorKind`` or ``JwtErrorKind``.  Callers can
either catch the concrete subclass or switch on ``exc.kind``.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ArithmeticErrorKind",
    "CalculatorError",
    "IntegerOverflowError",
    "DivisionByZeroError",
    "JwtErrorKind",
    "JwtError",
    "InvalidFormatError",
    "Base64DecodeError",
    "JsonParseError",
]


# ---------------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------------

class ArithmeticErrorKind(str, Enum):
    OVERFLOW = "overflow"
    DIVISION_BY_ZERO = "division_by_zero"


class CalculatorError(ArithmeticError):
    """Raised when a calculator operation cannot be applied.

    The register is never modified when this is raised.
    """

    kind: ArithmeticErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IntegerOverflowError(CalculatorError):
    """The result does not fit in a signed 32-bit register."""

    kind = ArithmeticErrorKind.OVERFLOW

    def __init__(self, operation: str, value: int, operand: int) -> None:
        super().__init__(
            f"Integer overflow: {value} {operation} {operand} "
            f"does not fit in a 32-bit signed integer"
        )
        self.operation = operation
        self.value = value
        self.operand = operand


class DivisionByZeroError(CalculatorError):
    """Division with a zero operand."""

    kind = ArithmeticErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Division by zero")


# ---------------------------------------------------------------------------
# JWT decoder
# ---------------------------------------------------------------------------

class JwtErrorKind(str, Enum):
    INVALID_FORMAT = "invalid_format"
    BASE64_ERROR = "base64_error"
    JSON_ERROR = "json_error"


class JwtError(Exception):
    """Raised when a JWT cannot be decoded.

    Attributes:
        kind: Which of the three failure kinds this is.
        message: Diagnostic from the underlying decoder/parser, if any.
        segment: ``"header"`` or ``"payload"`` for content errors, else None.
    """

    kind: JwtErrorKind

    def __init__(self, text: str, message: str = "", segment: str | None = None) -> None:
        super().__init__(text)
        self.message = message
        self.segment = segment


class InvalidFormatError(JwtError):
    kind = JwtErrorKind.INVALID_FORMAT

    def __init__(self, parts: int) -> None:
        super().__init__(
            f"Invalid JWT format: expected 3 parts (header.payload.signature), got {parts}."
        )
        self.parts = parts


class Base64DecodeError(JwtError):
    kind = JwtErrorKind.BASE64_ERROR

    def __init__(self, segment: str, message: str) -> None:
        super().__init__(f"Could not base64url-decode {segment}: {message}", message, segment)


class JsonParseError(JwtError):
    kind = JwtErrorKind.JSON_ERROR

    def __init__(self, segment: str, message: str) -> None:
        super().__init__(f"Could not parse {segment} as JSON: {message}", message, segment)
