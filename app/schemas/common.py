"""
Common response schemas for consistent API structure.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format."""
    model_config = ConfigDict(from_attributes=True)

    error: str = Field(..., description="Error message", json_schema_extra={"example": "Validation failed"})
    details: list[Any] | dict[str, Any] | str | None = Field(
        None,
        description="Additional error details",
        json_schema_extra={"example": [{"field": "shop_name", "message": "Field required"}]}
    )


class MessageResponseSchema(BaseModel):
    """Simple message response format."""
    model_config = ConfigDict(from_attributes=True)

    message: str = Field(..., description="Response message", json_schema_extra={"example": "Part deleted successfully"})
