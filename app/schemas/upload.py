"""Upload response schemas."""

from pydantic import BaseModel, Field


class ImageUploadResponseSchema(BaseModel):
    """Location of a stored image."""

    image_url: str = Field(
        description="Public URL of the stored image",
        json_schema_extra={"example": "/uploads/image-1757875127652-621218824.jpg"}
    )
