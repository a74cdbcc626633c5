"""Exceptions raised by fix-with-ai.

Most failures in the prompt pipeline are expected and silent: an unparseable
frame is skipped, a missing source file yields no snippet. These exceptions
cover the few places where a caller has to be told something went wrong.
"""


class FixWithAIError(Exception):
    """Base exception for all fix-with-ai errors."""


class ConfigError(FixWithAIError):
    """Invalid configuration, e.g. a prompt template missing placeholders."""


class SnippetReadError(FixWithAIError):
    """Failed to read the source file a snippet is taken from.

    Attributes:
        file_path: Path that could not be read.
    """

    def __init__(self, message: str, file_path: str) -> None:
        super().__init__(message)
        self.file_path = file_path
