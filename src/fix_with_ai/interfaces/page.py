"""Interfaces of the browser page objects the snapshot is taken from."""

from typing import Protocol


class Locator(Protocol):
    """Handle to elements on a page."""

    async def aria_snapshot(self) -> str:
        """
        Capture the accessibility tree under this locator as YAML-like text.

        Returns:
            Snapshot text listing roles, names and nesting
        """
        ...


class Page(Protocol):
    """A live browser page, e.g. ``playwright.async_api.Page``."""

    def locator(self, selector: str) -> Locator:
        """Create a locator for a selector."""
        ...
