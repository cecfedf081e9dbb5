"""Part schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.models.part import Availability


class PartCreateSchema(BaseModel):
    """Schema for creating a new part listing."""

    seller_id: int = Field(
        ...,
        description="ID of the seller listing the part",
        json_schema_extra={"example": 1}
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Part name",
        json_schema_extra={"example": "Brake Pad Set - Front"}
    )
    description: str | None = Field(
        None,
        description="Free text description of the part",
        json_schema_extra={"example": "High quality brake pads for Toyota Camry"}
    )
    price: Decimal | None = Field(
        None,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Asking price",
        json_schema_extra={"example": "180.00"}
    )
    vehicle_make: str | None = Field(
        None,
        max_length=100,
        description="Vehicle make the part fits",
        json_schema_extra={"example": "Toyota"}
    )
    vehicle_model: str | None = Field(
        None,
        max_length=100,
        description="Vehicle model the part fits",
        json_schema_extra={"example": "Camry"}
    )
    vehicle_year: str | None = Field(
        None,
        max_length=50,
        description="Vehicle year or year range",
        json_schema_extra={"example": "2020-2023"}
    )
    availability: Availability = Field(
        default=Availability.IN_STOCK,
        description="Stock state",
        json_schema_extra={"example": "in_stock"}
    )
    image_url: str | None = Field(
        None,
        max_length=500,
        description="URL of the part image",
        json_schema_extra={"example": "/uploads/image-1757875127652-621218824.jpg"}
    )


class PartUpdateSchema(BaseModel):
    """Schema for updating a part listing. The owning seller cannot change."""

    name: str | None = Field(None, min_length=1, max_length=255, description="Part name")
    description: str | None = Field(None, description="Part description")
    price: Decimal | None = Field(
        None, ge=0, max_digits=10, decimal_places=2, description="Asking price"
    )
    vehicle_make: str | None = Field(None, max_length=100, description="Vehicle make")
    vehicle_model: str | None = Field(None, max_length=100, description="Vehicle model")
    vehicle_year: str | None = Field(None, max_length=50, description="Vehicle year or range")
    availability: Availability | None = Field(None, description="Stock state")
    image_url: str | None = Field(None, max_length=500, description="URL of the part image")


class PartResponseSchema(BaseModel):
    """Schema for part API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique part ID", json_schema_extra={"example": 1})
    seller_id: int = Field(description="ID of the owning seller", json_schema_extra={"example": 1})
    name: str = Field(description="Part name", json_schema_extra={"example": "Brake Pad Set - Front"})
    description: str | None = Field(description="Part description")
    price: Decimal | None = Field(description="Asking price", json_schema_extra={"example": "180.00"})
    vehicle_make: str | None = Field(description="Vehicle make", json_schema_extra={"example": "Toyota"})
    vehicle_model: str | None = Field(description="Vehicle model", json_schema_extra={"example": "Camry"})
    vehicle_year: str | None = Field(description="Vehicle year or range", json_schema_extra={"example": "2020-2023"})
    availability: Availability = Field(description="Stock state", json_schema_extra={"example": "in_stock"})
    image_url: str | None = Field(description="URL of the part image")
    created_at: datetime = Field(description="Timestamp when the part was listed")


class PartListQuerySchema(BaseModel):
    """Query parameters for listing parts."""

    seller_id: int | None = Field(None, description="Only return parts of this seller")
