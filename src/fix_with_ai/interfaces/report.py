"""Interfaces of the test runner objects the attachment step works with."""

from typing import Protocol


class ErrorInfo(Protocol):
    """Error reported for a failed test."""

    @property
    def message(self) -> str | None:
        """Error message, possibly with terminal color codes."""
        ...

    @property
    def stack(self) -> str | None:
        """Message followed by the stack trace lines."""
        ...


class ProjectInfo(Protocol):
    """Test project settings."""

    @property
    def retries(self) -> int:
        """Maximum number of retries for a failed test."""
        ...


class TestInfo(Protocol):
    """Information about the currently running test.

    Matches the shape of a Playwright-style ``testInfo`` object: the test
    title, the error of the current run (None if it passed), the retry
    index and a way to attach files or text to the report.
    """

    @property
    def title(self) -> str:
        """Test title."""
        ...

    @property
    def error(self) -> ErrorInfo | None:
        """First error of the current run, None if the test passed."""
        ...

    @property
    def retry(self) -> int:
        """Retry index of the current run, 0 for the first run."""
        ...

    @property
    def project(self) -> ProjectInfo:
        """Project the test belongs to."""
        ...

    async def attach(self, name: str, *, body: str) -> None:
        """
        Attach a named text body to the test report.

        Args:
            name: Display name of the attachment
            body: Attachment content
        """
        ...
