"""Seller management API endpoints."""

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.contact import ContactResponseSchema
from app.schemas.seller import (
    SellerCreateSchema,
    SellerResponseSchema,
    SellerUpdateSchema,
    SellerWithPartsSchema,
)
from app.services.container import ServiceContainer
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

sellers_bp = Blueprint("sellers", __name__, url_prefix="/sellers")


@sellers_bp.route("", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=list[SellerResponseSchema]))
@handle_api_errors
@inject
def list_sellers(seller_service=Provide[ServiceContainer.seller_service]):
    """List all sellers."""
    sellers = seller_service.get_all_sellers()
    return [SellerResponseSchema.model_validate(seller).model_dump() for seller in sellers]


@sellers_bp.route("", methods=["POST"])
@api.validate(json=SellerCreateSchema, resp=SpectreeResponse(HTTP_201=SellerResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema, HTTP_409=ErrorResponseSchema))
@handle_api_errors
@inject
def create_seller(seller_service=Provide[ServiceContainer.seller_service]):
    """Register a seller shop for an existing user."""
    data = SellerCreateSchema.model_validate(request.get_json())
    seller = seller_service.create_seller(
        user_id=data.user_id,
        shop_name=data.shop_name,
        address=data.address,
        phone=data.phone,
        description=data.description,
        whatsapp=data.whatsapp,
        location=data.location.model_dump() if data.location else None
    )
    return SellerResponseSchema.model_validate(seller).model_dump(), 201


@sellers_bp.route("/pending/verification", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=list[SellerResponseSchema]))
@handle_api_errors
@inject
def list_pending_sellers(seller_service=Provide[ServiceContainer.seller_service]):
    """List sellers awaiting verification."""
    sellers = seller_service.get_pending_sellers()
    return [SellerResponseSchema.model_validate(seller).model_dump() for seller in sellers]


@sellers_bp.route("/by-user/<int:user_id>", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=SellerWithPartsSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def get_seller_by_user(user_id: int, seller_service=Provide[ServiceContainer.seller_service]):
    """Get the shop owned by a user."""
    seller = seller_service.get_seller_by_user(user_id)
    return SellerWithPartsSchema.model_validate(seller).model_dump()


@sellers_bp.route("/<int:seller_id>", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=SellerWithPartsSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def get_seller(seller_id: int, seller_service=Provide[ServiceContainer.seller_service]):
    """Get seller details with parts and owner."""
    seller = seller_service.get_seller_detail(seller_id)
    return SellerWithPartsSchema.model_validate(seller).model_dump()


@sellers_bp.route("/<int:seller_id>", methods=["PUT"])
@api.validate(json=SellerUpdateSchema, resp=SpectreeResponse(HTTP_200=SellerResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def update_seller(seller_id: int, seller_service=Provide[ServiceContainer.seller_service]):
    """Update seller profile."""
    data = SellerUpdateSchema.model_validate(request.get_json())
    seller = seller_service.update_seller(seller_id, **data.model_dump(exclude_unset=True))
    return SellerResponseSchema.model_validate(seller).model_dump()


@sellers_bp.route("/<int:seller_id>/verify", methods=["POST"])
@api.validate(resp=SpectreeResponse(HTTP_200=SellerResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def verify_seller(seller_id: int, seller_service=Provide[ServiceContainer.seller_service]):
    """Mark a seller as verified."""
    seller = seller_service.verify_seller(seller_id)
    return SellerResponseSchema.model_validate(seller).model_dump()


@sellers_bp.route("/<int:seller_id>/contacts", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=list[ContactResponseSchema], HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def list_seller_contacts(seller_id: int, seller_service=Provide[ServiceContainer.seller_service]):
    """List contact events for a seller."""
    contacts = seller_service.get_seller_contacts(seller_id)
    return [ContactResponseSchema.model_validate(contact).model_dump() for contact in contacts]
