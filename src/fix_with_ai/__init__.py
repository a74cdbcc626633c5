"""Fix with AI: turn a failed UI test into a prompt for an AI assistant."""

from fix_with_ai._version import __version__
from fix_with_ai.config import FixWithAIConfig, load_config
from fix_with_ai.core import (
    ErrorLocationResolver,
    FrameFilter,
    PromptBuilder,
    PromptTemplate,
    SnippetExtractor,
    StackFrameParser,
    attach_fix_with_ai,
    strip_ansi_escapes,
)
from fix_with_ai.errors import ConfigError, FixWithAIError, SnippetReadError
from fix_with_ai.models import CodeSnippet, ResolvedLocation, StackFrame, TestError

__all__ = [
    "CodeSnippet",
    "ConfigError",
    "ErrorLocationResolver",
    "FixWithAIConfig",
    "FixWithAIError",
    "FrameFilter",
    "PromptBuilder",
    "PromptTemplate",
    "ResolvedLocation",
    "SnippetExtractor",
    "SnippetReadError",
    "StackFrame",
    "StackFrameParser",
    "TestError",
    "__version__",
    "attach_fix_with_ai",
    "load_config",
    "strip_ansi_escapes",
]
