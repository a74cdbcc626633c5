"""Protocol definitions for test runner and browser collaborators."""

from .page import Locator, Page
from .report import ErrorInfo, ProjectInfo, TestInfo

__all__ = ["ErrorInfo", "Locator", "Page", "ProjectInfo", "TestInfo"]
