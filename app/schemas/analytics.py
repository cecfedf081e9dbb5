"""Analytics schemas for the admin dashboard."""

from pydantic import BaseModel, ConfigDict, Field


class AnalyticsSchema(BaseModel):
    """Marketplace-wide counters."""

    model_config = ConfigDict(from_attributes=True)

    total_sellers: int = Field(description="Number of registered sellers", json_schema_extra={"example": 4})
    total_parts: int = Field(description="Number of listed parts", json_schema_extra={"example": 11})
    total_searches: int = Field(description="Number of logged searches", json_schema_extra={"example": 2})
    pending_verifications: int = Field(
        description="Number of sellers awaiting verification",
        json_schema_extra={"example": 1}
    )
