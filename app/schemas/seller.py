"""Seller schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.part import PartResponseSchema
from app.schemas.user import UserSummarySchema


class SellerLocationSchema(BaseModel):
    """Geographic position of a shop."""

    model_config = ConfigDict(from_attributes=True)

    lat: float = Field(..., ge=-90, le=90, json_schema_extra={"example": 5.5777})
    lng: float = Field(..., ge=-180, le=180, json_schema_extra={"example": -0.2309})


class SellerCreateSchema(BaseModel):
    """Schema for registering a new seller shop."""

    user_id: int = Field(
        ...,
        description="ID of the user owning the shop",
        json_schema_extra={"example": 3}
    )
    shop_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Shop name shown to buyers",
        json_schema_extra={"example": "Auto Parts Ghana"}
    )
    description: str | None = Field(
        None,
        description="Free text description of the shop",
        json_schema_extra={"example": "Specializing in Toyota and Honda parts since 2015"}
    )
    address: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Physical address inside the market",
        json_schema_extra={"example": "Shop 45, Abossey Okai Market"}
    )
    phone: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Phone number",
        json_schema_extra={"example": "+233201234567"}
    )
    whatsapp: str | None = Field(
        None,
        max_length=50,
        description="WhatsApp number",
        json_schema_extra={"example": "+233201234567"}
    )
    location: SellerLocationSchema | None = Field(
        None,
        description="Map position of the shop"
    )


class SellerUpdateSchema(BaseModel):
    """Schema for updating a seller profile.

    Verification and rating fields are deliberately absent: they change only
    through the verify endpoint and review submissions.
    """

    shop_name: str | None = Field(None, min_length=1, max_length=255, description="Shop name")
    description: str | None = Field(None, description="Shop description")
    address: str | None = Field(None, min_length=1, max_length=500, description="Physical address")
    phone: str | None = Field(None, min_length=1, max_length=50, description="Phone number")
    whatsapp: str | None = Field(None, max_length=50, description="WhatsApp number")
    location: SellerLocationSchema | None = Field(None, description="Map position of the shop")


class SellerResponseSchema(BaseModel):
    """Schema for seller API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique seller ID", json_schema_extra={"example": 1})
    user_id: int = Field(description="ID of the owning user", json_schema_extra={"example": 3})
    shop_name: str = Field(description="Shop name", json_schema_extra={"example": "Auto Parts Ghana"})
    description: str | None = Field(description="Shop description")
    address: str = Field(description="Physical address")
    phone: str = Field(description="Phone number")
    whatsapp: str | None = Field(description="WhatsApp number")
    location: SellerLocationSchema | None = Field(description="Map position of the shop")
    verified: bool = Field(description="Whether an admin verified the shop")
    rating: Decimal = Field(
        description="Average review rating",
        json_schema_extra={"example": "4.50"}
    )
    review_count: int = Field(description="Number of reviews", json_schema_extra={"example": 2})
    created_at: datetime = Field(description="Timestamp when the seller was created")


class SellerWithPartsSchema(SellerResponseSchema):
    """Seller with its full part catalogue and owner details."""

    parts: list[PartResponseSchema] = Field(description="All parts listed by the seller")
    user: UserSummarySchema | None = Field(description="Owner account details")
