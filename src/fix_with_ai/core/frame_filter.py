"""Classification of stack frames into application and external frames."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from fix_with_ai.models.frame import StackFrame

if TYPE_CHECKING:
    from fix_with_ai.config.schema import FixWithAIConfig

DEFAULT_DEPENDENCY_DIRS: tuple[str, ...] = ("node_modules",)
DEFAULT_INTERNAL_PREFIXES: tuple[str, ...] = ("internal", "node:")

_PATH_SEPARATORS = re.compile(r"[\\/]")


class FrameFilter:
    """Decides which stack frames may be reported as the error location.

    A frame is external when it has no file, lives under an installed
    dependency directory, or is a runtime-internal pseudo-file. Internal
    frames are kept when ``show_internal_frames`` is set.

    Example:
        frame_filter = FrameFilter(show_internal_frames=False)
        app_frames = [f for f in frames if frame_filter.accepts(f)]
    """

    def __init__(
        self,
        show_internal_frames: bool = False,
        dependency_dirs: Iterable[str] = DEFAULT_DEPENDENCY_DIRS,
        internal_prefixes: Iterable[str] = DEFAULT_INTERNAL_PREFIXES,
    ) -> None:
        """Initialize the FrameFilter.

        Args:
            show_internal_frames: Keep runtime-internal frames (debug mode)
            dependency_dirs: Directory names holding installed packages
            internal_prefixes: Path prefixes of runtime-internal modules
        """
        self.show_internal_frames = show_internal_frames
        self._dependency_dirs = frozenset(dependency_dirs)
        self._internal_prefixes = tuple(internal_prefixes)

    @classmethod
    def from_config(cls, config: FixWithAIConfig) -> FrameFilter:
        """Create a FrameFilter from configuration."""
        return cls(
            show_internal_frames=config.show_internal_frames,
            dependency_dirs=config.filter.dependency_dirs,
            internal_prefixes=config.filter.internal_prefixes,
        )

    def is_dependency(self, file_path: str) -> bool:
        """Check if a path lies inside an installed dependency directory."""
        return any(part in self._dependency_dirs for part in _PATH_SEPARATORS.split(file_path))

    def is_internal(self, file_path: str) -> bool:
        """Check if a path names a runtime-internal module."""
        return file_path.startswith(self._internal_prefixes)

    def is_excluded(self, frame: StackFrame) -> bool:
        """Check if a frame must be left out of location resolution.

        Args:
            frame: Parsed stack frame

        Returns:
            True for external frames, False for application frames
        """
        if not frame.file_path:
            return True
        if self.is_dependency(frame.file_path):
            return True
        if self.is_internal(frame.file_path):
            return not self.show_internal_frames
        return False

    def accepts(self, frame: StackFrame) -> bool:
        """Check if a frame is an application frame."""
        return not self.is_excluded(frame)
