"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_DESTINATIONS = ["stdout", "file", "both"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stdout", description="stdout, file or both")
    file_path: str = Field("logs/solidkit.log", description="Log file path")
    max_size_mb: int = Field(10, gt=0, description="Rotate after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Upper-cased level

        Raises:
            ValueError: If level is invalid
        """
        level = v.upper()
        if level not in VALID_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v not in VALID_DESTINATIONS:
            raise ValueError(f"Log destination must be one of {VALID_DESTINATIONS}")
        return v
