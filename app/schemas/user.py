"""User schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import UserRole


class UserCreateSchema(BaseModel):
    """Schema for registering a new user."""

    username: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique login name",
        json_schema_extra={"example": "john_buyer"}
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Plain text password",
        json_schema_extra={"example": "password123"}
    )
    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Unique email address",
        json_schema_extra={"example": "john@email.com"}
    )
    role: UserRole = Field(
        default=UserRole.BUYER,
        description="Account role",
        json_schema_extra={"example": "buyer"}
    )


class LoginRequestSchema(BaseModel):
    """Schema for login requests."""

    username: str = Field(..., min_length=1, description="Login name")
    password: str = Field(..., min_length=1, description="Plain text password")


class UserResponseSchema(BaseModel):
    """Schema for user API responses. The password is never returned."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique user ID", json_schema_extra={"example": 1})
    username: str = Field(description="Login name", json_schema_extra={"example": "john_buyer"})
    email: str = Field(description="Email address", json_schema_extra={"example": "john@email.com"})
    role: UserRole = Field(description="Account role", json_schema_extra={"example": "buyer"})
    created_at: datetime = Field(description="Timestamp when the account was created")


class LoginResponseSchema(BaseModel):
    """Schema for successful login responses."""

    user: UserResponseSchema = Field(description="The authenticated user")


class UserSummarySchema(BaseModel):
    """Public owner details shown alongside a seller."""

    model_config = ConfigDict(from_attributes=True)

    username: str = Field(description="Login name of the shop owner")
    email: str = Field(description="Email address of the shop owner")
