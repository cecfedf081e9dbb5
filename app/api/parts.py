"""Parts management API endpoints."""

from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema, MessageResponseSchema
from app.schemas.part import (
    PartCreateSchema,
    PartListQuerySchema,
    PartResponseSchema,
    PartUpdateSchema,
)
from app.services.container import ServiceContainer
from app.services.part_service import PartService
from app.services.upload_service import UploadService
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

parts_bp = Blueprint("parts", __name__, url_prefix="/parts")


def _is_multipart() -> bool:
    content_type = request.content_type
    return bool(content_type and content_type.startswith('multipart/form-data'))


def _request_payload() -> dict[str, Any]:
    """Read part fields from a JSON body or from multipart form fields.

    Blank form fields are dropped so they fall back to schema defaults.
    """
    if _is_multipart():
        return {key: value for key, value in request.form.items() if value.strip()}
    return request.get_json(force=True)


def _store_image(upload_service: UploadService) -> str | None:
    """Store the optional `image` file of a multipart request."""
    if not _is_multipart():
        return None
    image = request.files.get('image')
    if image is None or not image.filename:
        return None
    return upload_service.save_image(image, 'image')


@parts_bp.route("", methods=["GET"])
@api.validate(query=PartListQuerySchema, resp=SpectreeResponse(HTTP_200=list[PartResponseSchema], HTTP_400=ErrorResponseSchema))
@handle_api_errors
@inject
def list_parts(part_service: PartService = Provide[ServiceContainer.part_service]) -> Any:
    """List all parts, optionally only those of one seller."""
    query_params = PartListQuerySchema.model_validate(request.args.to_dict())
    parts = part_service.get_parts(seller_id=query_params.seller_id)
    return [PartResponseSchema.model_validate(part).model_dump() for part in parts]


@parts_bp.route("", methods=["POST"])
@api.validate(resp=SpectreeResponse(HTTP_201=PartResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def create_part(
    part_service: PartService = Provide[ServiceContainer.part_service],
    upload_service: UploadService = Provide[ServiceContainer.upload_service]
) -> Any:
    """Create a part listing from JSON or multipart form data with an optional image."""
    data = PartCreateSchema.model_validate(_request_payload())
    image_url = _store_image(upload_service) or data.image_url

    part = part_service.create_part(
        seller_id=data.seller_id,
        name=data.name,
        description=data.description,
        price=data.price,
        vehicle_make=data.vehicle_make,
        vehicle_model=data.vehicle_model,
        vehicle_year=data.vehicle_year,
        availability=data.availability,
        image_url=image_url
    )
    return PartResponseSchema.model_validate(part).model_dump(), 201


@parts_bp.route("/<int:part_id>", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=PartResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def get_part(part_id: int, part_service: PartService = Provide[ServiceContainer.part_service]) -> Any:
    """Get single part details."""
    part = part_service.get_part(part_id)
    return PartResponseSchema.model_validate(part).model_dump()


@parts_bp.route("/<int:part_id>", methods=["PUT"])
@api.validate(resp=SpectreeResponse(HTTP_200=PartResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def update_part(
    part_id: int,
    part_service: PartService = Provide[ServiceContainer.part_service],
    upload_service: UploadService = Provide[ServiceContainer.upload_service]
) -> Any:
    """Update part details; a new image replaces the stored image URL."""
    data = PartUpdateSchema.model_validate(_request_payload())
    fields = data.model_dump(exclude_unset=True)

    # Look the part up before storing an image for it
    part_service.get_part(part_id)
    image_url = _store_image(upload_service)
    if image_url:
        fields['image_url'] = image_url

    part = part_service.update_part(part_id, **fields)
    return PartResponseSchema.model_validate(part).model_dump()


@parts_bp.route("/<int:part_id>", methods=["DELETE"])
@api.validate(resp=SpectreeResponse(HTTP_200=MessageResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def delete_part(part_id: int, part_service: PartService = Provide[ServiceContainer.part_service]) -> Any:
    """Delete a part listing."""
    part_service.delete_part(part_id)
    return {"message": "Part deleted successfully"}
