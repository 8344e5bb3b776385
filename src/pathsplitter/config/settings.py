"""Configuration settings for pathsplitter."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_DRAWABLE_TAGS: list[str] = [
    "rect",
    "circle",
    "ellipse",
    "line",
    "polyline",
    "polygon",
    "path",
    "text",
    "g",
    "image",
]


class IdConfig(BaseModel):
    """Configuration for identifier assignment."""

    path_prefix: str = Field(
        default="path",
        min_length=1,
        description="Prefix for identifiers of paths created by separation",
    )
    drawable_tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DRAWABLE_TAGS),
        description="Element tags that receive an identifier when unlabeled",
    )

    @field_validator("drawable_tags")
    @classmethod
    def _lowercase_tags(cls, tags: list[str]) -> list[str]:
        return [tag.lower() for tag in tags]


class ProcessingConfig(BaseModel):
    """Configuration for document analysis."""

    separate_paths: bool = Field(
        default=True,
        description="Split compound paths into separate shapes",
    )
    assign_ids: bool = Field(
        default=True,
        description="Assign identifiers to unlabeled drawable elements",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SplitterSettings(BaseModel):
    """Main application settings."""

    ids: IdConfig = Field(default_factory=IdConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SplitterSettings:
    """Get default application settings."""
    return SplitterSettings()
