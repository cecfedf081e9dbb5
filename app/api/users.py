"""User account API endpoints."""

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.user import UserCreateSchema, UserResponseSchema
from app.services.container import ServiceContainer
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

users_bp = Blueprint("users", __name__, url_prefix="/users")


@users_bp.route("", methods=["POST"])
@api.validate(json=UserCreateSchema, resp=SpectreeResponse(HTTP_201=UserResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_409=ErrorResponseSchema))
@handle_api_errors
@inject
def create_user(user_service=Provide[ServiceContainer.user_service]):
    """Register a new user account."""
    data = UserCreateSchema.model_validate(request.get_json())
    user = user_service.create_user(
        username=data.username,
        password=data.password,
        email=data.email,
        role=data.role
    )
    return UserResponseSchema.model_validate(user).model_dump(), 201


@users_bp.route("/<int:user_id>", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=UserResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def get_user(user_id: int, user_service=Provide[ServiceContainer.user_service]):
    """Get user details."""
    user = user_service.get_user(user_id)
    return UserResponseSchema.model_validate(user).model_dump()
