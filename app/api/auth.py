"""Login API endpoint."""

import logging

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.user import LoginRequestSchema, LoginResponseSchema, UserResponseSchema
from app.services.container import ServiceContainer
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


@auth_bp.route("/login", methods=["POST"])
@api.validate(json=LoginRequestSchema, resp=SpectreeResponse(HTTP_200=LoginResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_401=ErrorResponseSchema))
@handle_api_errors
@inject
def login(user_service=Provide[ServiceContainer.user_service]):
    """Check credentials and return the matching user.

    No session or token is issued; the client keeps the returned user.
    """
    data = LoginRequestSchema.model_validate(request.get_json())
    user = user_service.authenticate(data.username, data.password)
    logger.info("User %s logged in", user.id)
    return {"user": UserResponseSchema.model_validate(user).model_dump()}
