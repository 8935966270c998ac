"""Boundary smoke test: a fixed greeting."""

__all__ = ["GREETING", "say_hi"]

GREETING = "Hello mh from Python!"


def say_hi() -> str:
    return GREETING
