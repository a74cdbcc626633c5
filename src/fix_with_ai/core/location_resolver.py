"""Resolution of an error's stack trace to a single application location."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from fix_with_ai.core.frame_filter import FrameFilter
from fix_with_ai.core.stack_parser import StackFrameParser
from fix_with_ai.models.frame import ResolvedLocation
from fix_with_ai.utils.logging import get_logger

if TYPE_CHECKING:
    from fix_with_ai.config.schema import FixWithAIConfig

log = get_logger(__name__)


class ErrorLocationResolver:
    """Finds where in application code an error happened.

    The stack text usually starts with the error message, which may span
    several lines. Frame lines begin at the first indented ``at`` line;
    everything above it is skipped. The first frame that has a file and a
    line and passes the FrameFilter wins.

    Example:
        resolver = ErrorLocationResolver()
        location = resolver.resolve(error.stack)
        if location:
            print(f"{location.file_path}:{location.line}")
    """

    FRAME_LINE_PATTERN = re.compile(r"^\s+at ")

    def __init__(
        self,
        parser: StackFrameParser | None = None,
        frame_filter: FrameFilter | None = None,
    ) -> None:
        """Initialize the ErrorLocationResolver.

        Args:
            parser: Stack line parser (default: StackFrameParser())
            frame_filter: Frame classifier (default: FrameFilter())
        """
        self._parser = parser or StackFrameParser()
        self._filter = frame_filter or FrameFilter()

    @classmethod
    def from_config(cls, config: FixWithAIConfig) -> ErrorLocationResolver:
        """Create an ErrorLocationResolver from configuration."""
        return cls(frame_filter=FrameFilter.from_config(config))

    def frame_lines(self, stack: str | None) -> list[str]:
        """Split stack text and drop the message header above the frames.

        Args:
            stack: Full stack text, possibly None

        Returns:
            Candidate frame lines; all lines when no frame marker is found
        """
        lines = (stack or "").split("\n")
        for index, line in enumerate(lines):
            if self.FRAME_LINE_PATTERN.match(line):
                return lines[index:]
        return lines

    def resolve(self, stack: str | None) -> ResolvedLocation | None:
        """Resolve stack text to the first application frame's location.

        Args:
            stack: Full stack text, possibly None

        Returns:
            ResolvedLocation, or None if no application frame exists
        """
        for line in self.frame_lines(stack):
            frame = self._parser.parse_line(line)
            if frame is None:
                continue
            if not frame.has_location or self._filter.is_excluded(frame):
                log.debug("frame_skipped", frame=line.strip())
                continue

            location = ResolvedLocation.from_frame(frame)
            log.debug("location_resolved", location=str(location))
            return location

        log.debug("location_not_found")
        return None
