"""Extraction of source code snippets around an error location.

Reading the source is best effort: the file may have been deleted, moved
or never existed on disk (eval'd code). Any such failure yields no snippet
rather than an exception.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fix_with_ai.errors import SnippetReadError
from fix_with_ai.models.frame import ResolvedLocation
from fix_with_ai.models.snippet import CodeSnippet
from fix_with_ai.utils.logging import get_logger

if TYPE_CHECKING:
    from fix_with_ai.config.schema import FixWithAIConfig

log = get_logger(__name__)

DEFAULT_CONTEXT_LINES = 3


class SnippetExtractor:
    """Reads a bounded window of source lines around a location.

    The window covers zero-based indices ``line - context_lines`` through
    ``line + context_lines`` of the file split on line feeds, clipped to the
    file. With the default of 3 that is at most 7 lines.

    Example:
        extractor = SnippetExtractor()
        snippet = extractor.extract(location)
        if snippet:
            print(snippet.text)
    """

    def __init__(
        self,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the SnippetExtractor.

        Args:
            context_lines: Lines to include on each side of the window center
            encoding: Source file encoding
        """
        if context_lines < 1:
            raise ValueError(f"context_lines must be >= 1, got {context_lines}")
        self._context_lines = context_lines
        self._encoding = encoding

    @classmethod
    def from_config(cls, config: FixWithAIConfig) -> SnippetExtractor:
        """Create a SnippetExtractor from configuration."""
        return cls(
            context_lines=config.snippet.context_lines,
            encoding=config.snippet.encoding,
        )

    def read_lines(self, file_path: str) -> list[str]:
        """Read a source file split on line feeds.

        Carriage returns are kept as part of the line; only line feeds split.

        Args:
            file_path: Absolute path to the source file

        Returns:
            File lines without their line feeds

        Raises:
            SnippetReadError: If the file cannot be read
        """
        try:
            with Path(file_path).open(encoding=self._encoding, errors="replace", newline="") as f:
                content = f.read()
        except (OSError, LookupError, ValueError) as e:
            raise SnippetReadError(f"Failed to read {file_path}: {e}", file_path) from e
        return content.split("\n")

    def extract(self, location: ResolvedLocation) -> CodeSnippet | None:
        """Extract the snippet window for a location.

        Args:
            location: Resolved application location

        Returns:
            CodeSnippet, or None if the file cannot be read or the window is empty
        """
        try:
            lines = self.read_lines(location.file_path)
        except SnippetReadError as e:
            log.debug("snippet_unavailable", file_path=e.file_path, error=str(e))
            return None

        start = max(0, location.line - self._context_lines)
        end = min(len(lines), location.line + self._context_lines + 1)
        window = lines[start:end]

        if not window:
            log.debug("snippet_unavailable", file_path=location.file_path, line=location.line)
            return None

        return CodeSnippet(
            file_path=location.file_path,
            start_line=start + 1,
            lines=tuple(window),
            highlight_line=location.line if start < location.line <= end else None,
        )
