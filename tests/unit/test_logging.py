"""Tests for the logging configuration module."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from fix_with_ai.core.prompt_builder import PromptBuilder
from fix_with_ai.models.error import TestError
from fix_with_ai.utils.logging import (
    LogFormat,
    LogLevel,
    add_context_processor,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()
    clear_context()


class TestAddContextProcessor:
    """Tests for add_context_processor."""

    def test_adds_service_and_version(self) -> None:
        """Test that service and version fields are added."""
        result = add_context_processor(None, "info", {"event": "test"})  # type: ignore[arg-type]

        assert result["service"] == "fix-with-ai"
        assert "version" in result
        assert result["event"] == "test"


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize(
        ("level", "log_format"),
        [
            (LogLevel.DEBUG, LogFormat.CONSOLE),
            ("info", "json"),
            ("WARNING", "CONSOLE"),
        ],
    )
    def test_sets_root_level(self, level: LogLevel | str, log_format: LogFormat | str) -> None:
        """Test that the stdlib root logger level follows the setting."""
        configure_logging(level=level, log_format=log_format)

        expected = getattr(logging, str(level).upper())
        assert logging.getLogger().level == expected

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(ValueError):
            configure_logging(level="LOUD")

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that events are rendered as JSON with bound context."""
        configure_logging(level="INFO", log_format="json")
        bind_context(title="sample test")

        get_logger("fix_with_ai.test").info("fix_with_ai_attached", prompt_length=10)

        err = capsys.readouterr().err
        assert '"event": "fix_with_ai_attached"' in err
        assert '"title": "sample test"' in err
        assert '"service": "fix-with-ai"' in err

    def test_library_debug_events_shown_at_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that configuring DEBUG surfaces library events with their logger name."""
        configure_logging(level="DEBUG", log_format="json")

        get_logger("fix_with_ai.core.prompt_builder").debug("prompt_not_buildable")

        err = capsys.readouterr().err
        assert '"event": "prompt_not_buildable"' in err
        assert '"logger": "fix_with_ai.core.prompt_builder"' in err


@pytest.fixture
def default_root_level() -> Iterator[None]:
    """Put the stdlib root logger at its default WARNING level."""
    root = logging.getLogger()
    level = root.level
    root.setLevel(logging.WARNING)
    yield
    root.setLevel(level)


@pytest.mark.usefixtures("default_root_level")
class TestUnconfiguredLogging:
    """Tests for hosts that never call configure_logging."""

    def test_failed_prompt_build_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that library debug events print nothing to stdout or stderr."""
        structlog.reset_defaults()
        error = TestError(
            message="boom",
            stack="Error: boom\n    at a (/app/node_modules/x/a.js:1:1)",
        )

        assert PromptBuilder().build(title="t", error=error, aria_snapshot="s") == ""

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_get_logger_debug_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a fresh library logger drops debug events."""
        structlog.reset_defaults()

        get_logger("fix_with_ai.core.snippet_extractor").debug("snippet_unavailable")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
