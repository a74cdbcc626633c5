"""Data models and transfer objects."""

from .error import TestError
from .frame import ResolvedLocation, StackFrame
from .snippet import CodeSnippet

__all__ = [
    # Stack models
    "StackFrame",
    "ResolvedLocation",
    # Error models
    "TestError",
    # Snippet models
    "CodeSnippet",
]
