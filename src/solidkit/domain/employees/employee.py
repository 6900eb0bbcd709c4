"""Employee value object."""
from pydantic import Field

from solidkit.domain.base.value_object import ValueObject


class Employee(ValueObject):
    """An employee: a name and an annual salary. Nothing else."""

    name: str = Field(..., min_length=1)
    salary: float = Field(..., ge=0)
