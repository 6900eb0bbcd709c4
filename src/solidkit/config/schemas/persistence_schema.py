"""Persistence backend configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PersistenceConfig(BaseModel):
    """Which simulated database backs the order service, and where it lives."""

    backend: str = Field("mysql", description="Registered backend name")
    host: str = Field("localhost", description="Database host")
    port: Optional[int] = Field(None, gt=0, le=65535, description="Port, backend default when unset")
    database: str = Field("orders", description="Database name")

    @field_validator("backend")
    @classmethod
    def normalize_backend(cls, v: str) -> str:
        return v.strip().lower()
