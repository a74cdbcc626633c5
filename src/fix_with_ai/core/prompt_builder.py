"""Prompt assembly for the "Fix with AI" report attachment.

This module implements the PromptBuilder class that turns a failed test's
title, error and ARIA snapshot into a prompt for an AI assistant:
- Strips terminal color codes from the error message
- Resolves the error location and reads a code snippet around it
- Substitutes everything into a fixed template
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from fix_with_ai.core.location_resolver import ErrorLocationResolver
from fix_with_ai.core.snippet_extractor import SnippetExtractor
from fix_with_ai.errors import ConfigError
from fix_with_ai.models.snippet import CodeSnippet
from fix_with_ai.utils.logging import get_logger

if TYPE_CHECKING:
    from fix_with_ai.config.schema import FixWithAIConfig
    from fix_with_ai.interfaces.report import ErrorInfo

log = get_logger(__name__)

# Same grammar as Playwright's reporter: CSI sequences with a final byte,
# or OSC sequences terminated by BEL.
ANSI_ESCAPE_PATTERN = re.compile(
    "[\u001b\u009b][\\[\\]()#;?]*"
    "(?:"
    "(?:(?:[a-zA-Z\\d]*(?:;[-a-zA-Z\\d/#&.:=?%@~_]*)*)?\u0007)"
    "|"
    "(?:(?:\\d{1,4}(?:;\\d{0,4})*)?[\\dA-PR-TZcf-ntqry=><~])"
    ")"
)

PLACEHOLDERS: tuple[str, ...] = ("title", "error", "snippet", "ariaSnapshot")

_PLACEHOLDER_PATTERN = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")


def strip_ansi_escapes(text: str) -> str:
    """Remove terminal escape sequences (colors, cursor movement) from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


@dataclass(frozen=True)
class PromptTemplate:
    """Prompt text with ``{title}``, ``{error}``, ``{snippet}`` and ``{ariaSnapshot}``."""

    text: str
    placeholders: tuple[str, ...] = field(default=PLACEHOLDERS)

    def __post_init__(self) -> None:
        missing = [name for name in self.placeholders if f"{{{name}}}" not in self.text]
        if missing:
            raise ConfigError(f"Prompt template is missing placeholders: {', '.join(missing)}")

    @classmethod
    def from_file(cls, path: Path) -> PromptTemplate:
        """Load a template from a text file.

        Raises:
            ConfigError: If the file cannot be read or lacks placeholders
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to read prompt template {path}: {e}") from e
        return cls(text)

    def render(self, **values: str) -> str:
        """Substitute placeholder values in a single pass.

        Only the first occurrence of each placeholder is replaced, and
        substituted values are never scanned for further placeholders.
        """
        replaced: set[str] = set()

        def replacer(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in replaced or name not in values:
                return match.group(0)
            replaced.add(name)
            return values[name]

        return _PLACEHOLDER_PATTERN.sub(replacer, self.text)


DEFAULT_PROMPT_TEMPLATE = PromptTemplate(
    """
You are an expert in Playwright testing.
Fix the error in the Playwright test "{title}".
- Start response with a highlighted diff of fixed code snippet.
- Strictly rely on the ARIA snapshot of the page.
- Avoid adding any new code.
- Avoid adding comments to the code.
- Avoid changing the test logic.
- Use only role-based locators: getByRole, getByLabel, etc.
- For 'heading' role try to adjust level first
- Add concise notes about applied changes at the end of your response.
- If the test may be correct and there is a bug in the page, note it.

{error}

Code snippet of the failing test:

{snippet}

ARIA snapshot of the page:

{ariaSnapshot}
"""
)


class PromptBuilder:
    """Builds the "Fix with AI" prompt for a failed test.

    Building is best effort. An empty string means no prompt could be built
    (no message, no application frame, or unreadable source) and nothing
    should be attached.

    Example:
        builder = PromptBuilder()
        prompt = builder.build(title=title, error=error, aria_snapshot=snapshot)
        if prompt:
            attach(prompt)
    """

    def __init__(
        self,
        resolver: ErrorLocationResolver | None = None,
        extractor: SnippetExtractor | None = None,
        template: PromptTemplate = DEFAULT_PROMPT_TEMPLATE,
    ) -> None:
        """Initialize the PromptBuilder.

        Args:
            resolver: Stack location resolver (default: ErrorLocationResolver())
            extractor: Source snippet reader (default: SnippetExtractor())
            template: Prompt template
        """
        self._resolver = resolver or ErrorLocationResolver()
        self._extractor = extractor or SnippetExtractor()
        self._template = template

    @classmethod
    def from_config(cls, config: FixWithAIConfig) -> PromptBuilder:
        """Create a PromptBuilder from configuration.

        Raises:
            ConfigError: If the configured template file is invalid
        """
        template = (
            PromptTemplate.from_file(config.template_path)
            if config.template_path
            else DEFAULT_PROMPT_TEMPLATE
        )
        return cls(
            resolver=ErrorLocationResolver.from_config(config),
            extractor=SnippetExtractor.from_config(config),
            template=template,
        )

    def code_snippet(self, error: ErrorInfo) -> CodeSnippet | None:
        """Get the code snippet around the error's application location."""
        location = self._resolver.resolve(error.stack)
        if location is None:
            return None
        return self._extractor.extract(location)

    def build(self, title: str, error: ErrorInfo, aria_snapshot: str) -> str:
        """Build the prompt text.

        Args:
            title: Test title
            error: Error with message and stack text
            aria_snapshot: Accessibility tree snapshot of the page

        Returns:
            Prompt text, or an empty string if it cannot be built
        """
        error_message = strip_ansi_escapes(error.message or "")
        snippet = self.code_snippet(error)

        if not error_message or snippet is None or not snippet.text:
            log.debug(
                "prompt_not_buildable",
                title=title,
                has_message=bool(error_message),
                has_snippet=bool(snippet and snippet.text),
            )
            return ""

        return self._template.render(
            title=title,
            error=error_message,
            snippet=snippet.text,
            ariaSnapshot=aria_snapshot,
        ).strip()
