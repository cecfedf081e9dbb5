"""Contact event schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.contact import ContactType


class ContactCreateSchema(BaseModel):
    """Schema for recording a buyer contacting a seller."""

    user_id: int = Field(..., description="Contacting user", json_schema_extra={"example": 2})
    seller_id: int = Field(..., description="Contacted seller", json_schema_extra={"example": 1})
    type: ContactType = Field(..., description="Contact channel", json_schema_extra={"example": "whatsapp"})


class ContactResponseSchema(BaseModel):
    """Schema for contact event responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique contact event ID")
    user_id: int = Field(description="Contacting user")
    seller_id: int = Field(description="Contacted seller")
    type: ContactType = Field(description="Contact channel")
    created_at: datetime = Field(description="Timestamp of the contact")
