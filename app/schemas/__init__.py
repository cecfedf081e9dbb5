"""Pydantic schemas for request/response validation."""

# Import all schemas here for easy access
from app.schemas.part import (
    PartCreateSchema,
    PartResponseSchema,
    PartUpdateSchema,
)
from app.schemas.search import (
    SearchRequestSchema,
    SearchResponseSchema,
    SearchResultSchema,
)
from app.schemas.seller import (
    SellerCreateSchema,
    SellerResponseSchema,
    SellerUpdateSchema,
    SellerWithPartsSchema,
)

__all__: list[str] = [
    "PartCreateSchema",
    "PartResponseSchema",
    "PartUpdateSchema",
    "SearchRequestSchema",
    "SearchResponseSchema",
    "SearchResultSchema",
    "SellerCreateSchema",
    "SellerResponseSchema",
    "SellerUpdateSchema",
    "SellerWithPartsSchema",
]
