"""Base value object."""
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError


class ValueObject(BaseModel):
    """
    Immutable value holder.

    Value objects are compared by their fields and cannot be modified after
    construction. Invalid input surfaces as a domain ``ValidationError``
    rather than pydantic's own.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ValidationError(
                f"Invalid {type(self).__name__}: {', '.join(fields)}",
                e.errors(include_url=False)
            ) from e
