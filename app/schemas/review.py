"""Review schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreateSchema(BaseModel):
    """Schema for submitting a seller review."""

    user_id: int = Field(..., description="Reviewing user", json_schema_extra={"example": 2})
    seller_id: int = Field(..., description="Reviewed seller", json_schema_extra={"example": 1})
    rating: Decimal = Field(
        ...,
        ge=1,
        le=5,
        max_digits=2,
        decimal_places=1,
        description="Rating between 1.0 and 5.0",
        json_schema_extra={"example": "4.5"}
    )
    comment: str | None = Field(
        None,
        description="Optional review text",
        json_schema_extra={"example": "Very fast delivery as promised. Parts fit perfectly."}
    )


class ReviewResponseSchema(BaseModel):
    """Schema for review API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique review ID")
    user_id: int = Field(description="Reviewing user")
    seller_id: int = Field(description="Reviewed seller")
    rating: Decimal = Field(description="Rating", json_schema_extra={"example": "4.5"})
    comment: str | None = Field(description="Review text")
    created_at: datetime = Field(description="Timestamp of the review")
