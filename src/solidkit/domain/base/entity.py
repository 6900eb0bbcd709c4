"""Base domain entities - foundation for objects with identity."""
from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError


class Entity(BaseModel):
    """Base class for all domain entities."""
    model_config = ConfigDict(
        frozen=False,  # Entities are mutable
        validate_assignment=True,
        arbitrary_types_allowed=True
    )

    id: Optional[Any] = None
    created_at: Optional[datetime] = None

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ValidationError(
                f"Invalid {type(self).__name__}: {', '.join(fields)}",
                e.errors(include_url=False)
            ) from e

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__, self.id))
