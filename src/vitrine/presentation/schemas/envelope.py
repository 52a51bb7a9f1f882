"""
Response envelopes shared by every endpoint.

Success: {statusCode, data, message, success: true}
Failure: {statusCode, message, success: false, errors: [...]}
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope."""

    status_code: int = 200
    data: Optional[T] = None
    message: str = "Success"
    success: bool = True

    @classmethod
    def ok(cls, data: Any = None, message: str = "Success", status_code: int = 200):
        """Build a success envelope (success derived from status code)."""
        return cls(
            status_code=status_code,
            data=data,
            message=message,
            success=status_code < 400,
        )


class ApiErrorResponse(CamelModel):
    """Failure envelope."""

    status_code: int
    message: str
    success: bool = False
    errors: List[Any] = Field(default_factory=list)


class EmptyData(CamelModel):
    """Placeholder payload for endpoints returning no data."""
