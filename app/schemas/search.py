"""Search schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.part import PartResponseSchema
from app.schemas.seller import SellerWithPartsSchema


class SearchRequestSchema(BaseModel):
    """Search filters; blank filters are ignored."""

    user_id: int | None = Field(
        None,
        description="Signed-in user performing the search; anonymous searches are not logged",
        json_schema_extra={"example": 2}
    )
    vehicle_make: str | None = Field(None, max_length=100, json_schema_extra={"example": "Honda"})
    vehicle_model: str | None = Field(None, max_length=100, json_schema_extra={"example": "City"})
    vehicle_year: str | None = Field(None, max_length=50, json_schema_extra={"example": "2020"})
    part_name: str | None = Field(None, max_length=255, json_schema_extra={"example": "brake"})
    image_url: str | None = Field(
        None,
        max_length=500,
        description="Image previously uploaded through /upload/search-image"
    )

    @field_validator("vehicle_make", "vehicle_model", "vehicle_year", "part_name", "image_url")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None


class SearchResponseSchema(BaseModel):
    """Schema for logged search records."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique search ID")
    user_id: int | None = Field(description="User who searched")
    vehicle_make: str | None = Field(description="Vehicle make filter")
    vehicle_model: str | None = Field(description="Vehicle model filter")
    vehicle_year: str | None = Field(description="Vehicle year filter")
    part_name: str | None = Field(description="Part name filter")
    image_url: str | None = Field(description="Uploaded search image")
    created_at: datetime = Field(description="Timestamp of the search")


class SearchResultSchema(BaseModel):
    """One seller together with the subset of its parts matching a search."""

    model_config = ConfigDict(from_attributes=True)

    seller: SellerWithPartsSchema = Field(description="Seller with full catalogue and owner")
    matching_parts: list[PartResponseSchema] = Field(description="Parts of this seller matching the filters")
