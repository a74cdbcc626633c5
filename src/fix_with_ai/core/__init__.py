"""Core business logic components.

This module exports the main business logic classes:
- StackFrameParser: Parses JavaScript-style stack trace lines
- FrameFilter: Separates application frames from library and runtime frames
- ErrorLocationResolver: Picks the application frame an error came from
- SnippetExtractor: Reads source lines around a location
- PromptBuilder: Assembles the "Fix with AI" prompt
"""

from fix_with_ai.core.attachment import attach_fix_with_ai, will_be_retried
from fix_with_ai.core.frame_filter import FrameFilter
from fix_with_ai.core.location_resolver import ErrorLocationResolver
from fix_with_ai.core.prompt_builder import (
    DEFAULT_PROMPT_TEMPLATE,
    PromptBuilder,
    PromptTemplate,
    strip_ansi_escapes,
)
from fix_with_ai.core.snippet_extractor import SnippetExtractor
from fix_with_ai.core.stack_parser import StackFrameParser, file_url_to_path, rebalance_parens

__all__ = [
    "DEFAULT_PROMPT_TEMPLATE",
    "ErrorLocationResolver",
    "FrameFilter",
    "PromptBuilder",
    "PromptTemplate",
    "SnippetExtractor",
    "StackFrameParser",
    "attach_fix_with_ai",
    "file_url_to_path",
    "rebalance_parens",
    "strip_ansi_escapes",
    "will_be_retried",
]
