"""Tests for ErrorLocationResolver functionality."""

import pytest

from fix_with_ai.config.schema import FixWithAIConfig
from fix_with_ai.core.frame_filter import FrameFilter
from fix_with_ai.core.location_resolver import ErrorLocationResolver
from fix_with_ai.models.frame import ResolvedLocation


@pytest.fixture
def resolver() -> ErrorLocationResolver:
    """Create an ErrorLocationResolver with default settings."""
    return ErrorLocationResolver()


class TestResolve:
    """Tests for resolve method."""

    def test_skips_library_frames_around_application_frame(
        self,
        resolver: ErrorLocationResolver,
        click_timeout_stack: str,
    ) -> None:
        """Test that the only application frame is found between library frames."""
        location = resolver.resolve(click_timeout_stack)

        assert location == ResolvedLocation(
            file_path="/home/user/project/tests/sample.spec.ts",
            line=7,
            column=62,
        )

    def test_first_application_frame_wins(self, resolver: ErrorLocationResolver) -> None:
        """Test that later application frames are ignored."""
        stack = "\n".join(
            [
                "Error: boom",
                "    at inner (/app/src/inner.js:3:1)",
                "    at outer (/app/src/outer.js:9:2)",
            ]
        )

        location = resolver.resolve(stack)

        assert location is not None
        assert location.file_path == "/app/src/inner.js"
        assert location.line == 3

    def test_header_lines_are_not_frames(self, resolver: ErrorLocationResolver) -> None:
        """Test that a message line that looks like a location is skipped."""
        stack = "\n".join(
            [
                "Error: bad value at /app/fake.js:1:1",
                "    at check (/app/src/check.js:20:4)",
            ]
        )

        location = resolver.resolve(stack)

        assert location is not None
        assert location.file_path == "/app/src/check.js"

    def test_no_frame_marker_uses_whole_text(self, resolver: ErrorLocationResolver) -> None:
        """Test that unindented frames are still parsed."""
        location = resolver.resolve("check (/app/src/check.js:20:4)")

        assert location is not None
        assert location.file_path == "/app/src/check.js"
        assert location.column == 4

    @pytest.mark.parametrize(
        "stack",
        [None, "", "Error: boom", "Error: boom\n    at Array.map (native)"],
    )
    def test_nothing_to_resolve(self, resolver: ErrorLocationResolver, stack: str | None) -> None:
        """Test that stacks without application frames resolve to None."""
        assert resolver.resolve(stack) is None

    def test_only_library_frames(self, resolver: ErrorLocationResolver) -> None:
        """Test that dependency and internal frames never resolve."""
        stack = "\n".join(
            [
                "Error: boom",
                "    at a (/app/node_modules/lib/a.js:1:1)",
                "    at b (node:internal/timers:5:3)",
            ]
        )

        assert resolver.resolve(stack) is None

    def test_line_zero_is_skipped(self, resolver: ErrorLocationResolver) -> None:
        """Test that frames without a usable line are skipped."""
        stack = "Error\n    at /app/bundle.js:0:0\n    at /app/src/real.js:4:4"

        location = resolver.resolve(stack)

        assert location is not None
        assert location.file_path == "/app/src/real.js"

    def test_internal_frames_in_debug_mode(self) -> None:
        """Test that internal frames resolve when enabled."""
        resolver = ErrorLocationResolver(frame_filter=FrameFilter(show_internal_frames=True))
        stack = "Error\n    at listOnTimeout (node:internal/timers:573:17)"

        location = resolver.resolve(stack)

        assert location is not None
        assert location.file_path == "node:internal/timers"

    def test_from_config(self) -> None:
        """Test that configuration reaches the frame filter."""
        resolver = ErrorLocationResolver.from_config(FixWithAIConfig(show_internal_frames=True))

        location = resolver.resolve("Error\n    at run (node:internal/main:1:1)")

        assert location is not None


class TestFrameLines:
    """Tests for frame_lines method."""

    def test_drops_header(self, resolver: ErrorLocationResolver, click_timeout_stack: str) -> None:
        """Test that message and call log lines are removed."""
        lines = resolver.frame_lines(click_timeout_stack)

        assert lines[0].strip().startswith("at ProtocolError.wrap")
        assert all("Call log" not in line for line in lines)

    def test_without_marker_returns_all_lines(self, resolver: ErrorLocationResolver) -> None:
        """Test that all lines are candidates when no frame marker exists."""
        assert resolver.frame_lines("a\nb") == ["a", "b"]

    def test_none_stack(self, resolver: ErrorLocationResolver) -> None:
        """Test that a missing stack yields a single empty line."""
        assert resolver.frame_lines(None) == [""]
