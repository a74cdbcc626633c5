"""Data models for stack frames and resolved error locations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StackFrame:
    """A single parsed line of a JavaScript-style stack trace.

    Every positional field is optional so that "not present in the text"
    stays distinguishable from a real empty name or a zero column.
    """

    raw_text: str
    function_name: str | None = None
    file_path: str | None = None
    line: int | None = None
    column: int | None = None
    is_native: bool = False
    is_constructor: bool = False
    eval_origin: str | None = None  # Informational only, never resolved

    @property
    def file(self) -> str:
        """File path, or an empty string for native and location-less frames."""
        return self.file_path or ""

    @property
    def line_number(self) -> int:
        """1-based line number, or 0 when absent."""
        return self.line or 0

    @property
    def column_number(self) -> int:
        """1-based column number, or 0 when absent."""
        return self.column or 0

    @property
    def has_location(self) -> bool:
        """True when the frame points at a file and a line."""
        return bool(self.file_path) and bool(self.line)


@dataclass(frozen=True)
class ResolvedLocation:
    """The application source position an error is attributed to."""

    file_path: str
    line: int
    column: int = 0

    def __post_init__(self) -> None:
        if not self.file_path:
            raise ValueError("file_path must not be empty")
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"

    @classmethod
    def from_frame(cls, frame: StackFrame) -> "ResolvedLocation":
        """Build a location from a frame that has a file and a line.

        Raises:
            ValueError: If the frame has no file or no line
        """
        return cls(
            file_path=frame.file,
            line=frame.line_number,
            column=frame.column_number,
        )
