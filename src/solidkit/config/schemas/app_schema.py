"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from solidkit.domain.base.exceptions import ConfigurationError

from .logging_schema import LoggingConfig
from .persistence_schema import PersistenceConfig

OUTPUT_FORMATS = ["json", "yaml", "table", "list"]


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    persistence: PersistenceConfig = Field(default_factory=lambda: PersistenceConfig())
    output_format: str = Field("json", description="Default CLI output format")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Args:
        data: Configuration mapping

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        return AppConfig(**data)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
