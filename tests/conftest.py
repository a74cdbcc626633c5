"""Shared test fixtures for fix-with-ai."""

from collections.abc import Callable
from pathlib import Path

import pytest

# Get the fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
STACKS_DIR = FIXTURES_DIR / "stacks"

SAMPLE_SOURCE_LINES = [f"line {n}" for n in range(1, 11)]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def click_timeout_stack() -> str:
    """Load a Playwright click timeout stack with library frames around the test frame."""
    return (STACKS_DIR / "click_timeout.txt").read_text()


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Create a 10-line source file whose lines read 'line 1' .. 'line 10'."""
    path = tmp_path / "tests" / "sample.spec.ts"
    path.parent.mkdir(parents=True)
    path.write_text("\n".join(SAMPLE_SOURCE_LINES))
    return path


@pytest.fixture
def make_stack() -> Callable[[Path, int, int], str]:
    """Return a factory for a stack whose first application frame is file:line:column."""

    def factory(file_path: Path, line: int, column: int = 1) -> str:
        return "\n".join(
            [
                "Error: Timeout 1000ms exceeded.",
                "    at Page.waitFor (/opt/app/node_modules/playwright-core/lib/page.js:10:3)",
                f"    at run ({file_path}:{line}:{column})",
                "    at next (node:internal/async_hooks:20:7)",
            ]
        )

    return factory


@pytest.fixture
def aria_snapshot() -> str:
    """Return a small ARIA snapshot of a page."""
    return '- banner:\n  - heading "Playwright" [level=1]\n  - link "Get started"'
