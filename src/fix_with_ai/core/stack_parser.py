"""Parser for JavaScript-style stack trace lines.

This module implements the StackFrameParser class that turns one line of a
V8 / Node stack trace into a StackFrame. It supports:
- Named frames: ``at fn (file.js:1:2)``
- Anonymous frames: ``at file.js:1:2``
- Constructor frames: ``at new Foo (file.js:1:2)``
- Eval frames: ``at eval (eval at fn (a.js:1:2), b.js:3:4)``
- Native frames: ``at Array.map (native)``
- ``file://`` URLs and method aliases (``[as alias]``)
- Parentheses inside function names
"""

from __future__ import annotations

import os
import re
from urllib.parse import unquote

from fix_with_ai.models.frame import StackFrame

FILE_URL_PREFIX = "file://"

_DRIVE_LETTER = re.compile(r"^[a-zA-Z]:")


def file_url_to_path(file_url: str, path_separator: str = os.sep) -> str:
    """Convert a ``file://`` URL to a filesystem path.

    Percent-escapes are decoded, the leading slash of a Windows drive path
    (``/C:/...``) is dropped and forward slashes become ``path_separator``.
    Anything that is not a file URL is returned unchanged.

    Args:
        file_url: URL or path as it appears in the stack frame
        path_separator: Separator to use in the resulting path

    Returns:
        Plain filesystem path
    """
    if not file_url.startswith(FILE_URL_PREFIX):
        return file_url

    path = unquote(file_url[len(FILE_URL_PREFIX) :])
    if path.startswith("/") and _DRIVE_LETTER.match(path[1:]):
        path = path[1:]

    return path.replace("/", path_separator)


def rebalance_parens(function_name: str | None, file_path: str) -> tuple[str | None, str]:
    """Move an unbalanced prefix of ``file_path`` onto the function name.

    When a parenthesized location clause captures something like
    ``helper.js:1:1) [as alias] (actual/file.js``, the real file is what
    follows the last unbalanced ``(`` preceded by a space. Scanning backward
    from the end, every ``)`` raises the balance and every `` (`` lowers it;
    the first point where the balance drops below zero splits the string.

    Args:
        function_name: Function name captured so far
        file_path: Captured file portion of the location clause

    Returns:
        Tuple of (function_name, file_path) after rebalancing
    """
    closes = 0
    split_at = -1
    i = len(file_path) - 1

    while i > 0 and split_at < 0:
        char = file_path[i]
        if char == ")":
            closes += 1
        elif char == "(" and file_path[i - 1] == " ":
            closes -= 1
            if closes < 0:
                split_at = i
        i -= 1

    if split_at < 0:
        return function_name, file_path

    before = file_path[: split_at - 1]
    after = file_path[split_at + 1 :]
    prefix = f"{function_name} " if function_name else ""
    return f"{prefix}({before}", after


class StackFrameParser:
    """Parser for JavaScript-style stack frames.

    Responsibilities:
    - Recognize frame lines and reject everything else
    - Extract function name, file, line and column
    - Normalize ``file://`` URLs to filesystem paths

    Filtering library or runtime frames is not done here; see FrameFilter.

    Example:
        parser = StackFrameParser()
        frame = parser.parse_line("    at login (/app/tests/login.spec.ts:12:5)")
        print(frame.file_path, frame.line, frame.column)
    """

    FRAME_PATTERN = re.compile(
        r"^"
        # Leading "at" marker, sometimes stripped
        r"(?:\s*at )?"
        # Constructor call
        r"(?:(?P<new>new) )?"
        # Function name, can be literally anything, may end with [as alias]
        r"(?:(?P<function>.*?) \()?"
        # Eval origin: eval at <origin> (file:line:col),
        r"(?:eval at (?P<eval_origin>[^ ]+) "
        r"\((?P<eval_file>.+?):(?P<eval_line>\d+):(?P<eval_column>\d+)\), )?"
        # file:line:col or native
        r"(?:(?P<file>.+?):(?P<line>\d+):(?P<column>\d+)|(?P<native>native))"
        # Close paren when the location clause was parenthesized
        r"(?P<close>\)?)$"
    )
    METHOD_ALIAS_PATTERN = re.compile(r"^(.*?) \[as (.*?)\]$")

    def __init__(self, path_separator: str = os.sep) -> None:
        """Initialize the StackFrameParser.

        Args:
            path_separator: Separator used when converting file URLs
        """
        self._path_separator = path_separator

    def parse_line(self, text: str) -> StackFrame | None:
        """Parse a single stack trace line.

        Args:
            text: One line of stack trace text

        Returns:
            StackFrame, or None if the line is not a frame
        """
        if not text:
            return None

        match = self.FRAME_PATTERN.match(text)
        if not match:
            return None

        function_name = match.group("function") or None
        is_constructor = match.group("new") is not None

        if match.group("native"):
            return StackFrame(
                raw_text=text,
                function_name=self._clean_function_name(function_name),
                is_native=True,
                is_constructor=is_constructor,
            )

        file_path = match.group("file")
        if match.group("close") == ")":
            function_name, file_path = rebalance_parens(function_name, file_path)

        eval_origin = match.group("eval_origin")

        return StackFrame(
            raw_text=text,
            function_name=self._clean_function_name(function_name),
            file_path=file_url_to_path(file_path, self._path_separator) or None,
            line=int(match.group("line")),
            column=int(match.group("column")),
            is_constructor=is_constructor,
            eval_origin=eval_origin,
        )

    def parse_stack(self, text: str) -> list[StackFrame]:
        """Parse every frame line of a stack trace.

        Args:
            text: Multi-line stack trace text

        Returns:
            List of StackFrame objects, unparseable lines dropped
        """
        frames: list[StackFrame] = []
        for line in (text or "").split("\n"):
            frame = self.parse_line(line)
            if frame is not None:
                frames.append(frame)
        return frames

    def _clean_function_name(self, function_name: str | None) -> str | None:
        """Reduce ``name [as alias]`` to the alias."""
        if not function_name:
            return None
        alias_match = self.METHOD_ALIAS_PATTERN.match(function_name)
        if alias_match:
            return alias_match.group(2)
        return function_name
