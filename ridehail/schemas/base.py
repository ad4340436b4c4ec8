"""
Base Pydantic schemas and common types.
"""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )


# Generic type for the response envelope
T = TypeVar("T")


class ApiResponse(BaseSchema, Generic[T]):
    """Success envelope shared by every endpoint."""
    success: bool = True
    data: Optional[T] = None
    message: str


class FieldError(BaseSchema):
    """One entry of a validation error list."""
    field: str
    message: str


class ErrorResponse(BaseSchema):
    """Failure envelope shared by every endpoint."""
    success: bool = False
    message: str
    errors: Optional[list[FieldError]] = None
