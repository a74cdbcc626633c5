"""Configuration loading and validation."""

from .loader import load_config
from .schema import FilterConfig, FixWithAIConfig, LoggingConfig, SnippetConfig

__all__ = [
    # Loader
    "load_config",
    # Root config
    "FixWithAIConfig",
    # Sections
    "FilterConfig",
    "LoggingConfig",
    "SnippetConfig",
]
