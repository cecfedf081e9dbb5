"""Contact event API endpoints."""

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.contact import ContactCreateSchema, ContactResponseSchema
from app.services.container import ServiceContainer
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

contacts_bp = Blueprint("contacts", __name__, url_prefix="/contacts")


@contacts_bp.route("", methods=["POST"])
@api.validate(json=ContactCreateSchema, resp=SpectreeResponse(HTTP_201=ContactResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def create_contact(contact_service=Provide[ServiceContainer.contact_service]):
    """Record that a user contacted or viewed a seller."""
    data = ContactCreateSchema.model_validate(request.get_json())
    contact = contact_service.create_contact(data.user_id, data.seller_id, data.type)
    return ContactResponseSchema.model_validate(contact).model_dump(), 201
