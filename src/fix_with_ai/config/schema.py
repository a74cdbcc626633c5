"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ATTACHMENT_NAME = "🤖 Fix with AI: copy prompt and paste to AI chat"


class SnippetConfig(BaseModel):
    """Code snippet configuration."""

    context_lines: int = Field(3, ge=1, le=50)
    encoding: str = "utf-8"


class FilterConfig(BaseModel):
    """Stack frame filtering configuration."""

    dependency_dirs: list[str] = ["node_modules"]
    internal_prefixes: list[str] = ["internal", "node:"]

    @field_validator("dependency_dirs")
    @classmethod
    def validate_dependency_dirs(cls, v: list[str]) -> list[str]:
        """Validate that dependency entries are bare directory names."""
        for name in v:
            if not name or "/" in name or "\\" in name:
                raise ValueError(f"Invalid dependency directory name: {name!r}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"


class FixWithAIConfig(BaseSettings):
    """Root configuration for fix-with-ai.

    Every field can be set from the environment with the ``FIX_WITH_AI_``
    prefix, e.g. ``FIX_WITH_AI_SHOW_INTERNAL_FRAMES=1`` or
    ``FIX_WITH_AI_SNIPPET__CONTEXT_LINES=5``.
    """

    show_internal_frames: bool = False
    attachment_name: str = DEFAULT_ATTACHMENT_NAME
    template_path: Path | None = None
    snippet: SnippetConfig = SnippetConfig()
    filter: FilterConfig = FilterConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="FIX_WITH_AI_",
        env_nested_delimiter="__",
    )
