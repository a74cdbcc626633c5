"""Data model for the error reported by a failed test."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TestError:
    """Message and stack text of a test failure.

    Mirrors the shape test runners report: both fields may be missing.
    """

    __test__ = False  # Not a pytest test class

    message: str | None = None
    stack: str | None = None
