"""
core-bridge — thread-safe 32-bit calculator and JWT structural decoder.
"""

from .calculator import INT32_MAX, INT32_MIN, Calculator
from .decoder import DecodedToken, decode, decode_token
from .errors import (
    ArithmeticErrorKind,
    Base64DecodeError,
    CalculatorError,
    DivisionByZeroError,
    IntegerOverflowError,
    InvalidFormatError,
    JsonParseError,
    JwtError,
    JwtErrorKind,
)
from .greeting import say_hi

__version__ = "0.1.0"

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "Calculator",
    "DecodedToken",
    "decode",
    "decode_token",
    "ArithmeticErrorKind",
    "Base64DecodeError",
    "CalculatorError",
    "DivisionByZeroError",
    "IntegerOverflowError",
    "InvalidFormatError",
    "JsonParseError",
    "JwtError",
    "JwtErrorKind",
    "say_hi",
]
