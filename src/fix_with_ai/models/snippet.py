"""Data model for source code snippets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeSnippet:
    """Contiguous source lines around an error location."""

    file_path: str
    start_line: int  # 1-based, first line in `lines`
    lines: tuple[str, ...]
    highlight_line: int | None = None  # Line to emphasize (error location)

    @property
    def end_line(self) -> int:
        """1-based number of the last line in the snippet."""
        return self.start_line + len(self.lines) - 1

    @property
    def line_count(self) -> int:
        """Number of lines in this snippet."""
        return len(self.lines)

    @property
    def text(self) -> str:
        """Snippet lines joined with line feeds."""
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.text
