"""Part search API endpoints."""

import logging

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.search import (
    SearchRequestSchema,
    SearchResponseSchema,
    SearchResultSchema,
)
from app.services.container import ServiceContainer
from app.services.search_service import SearchService
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

logger = logging.getLogger(__name__)

search_bp = Blueprint("search", __name__)


@search_bp.route("/search", methods=["POST"])
@api.validate(json=SearchRequestSchema, resp=SpectreeResponse(HTTP_200=list[SearchResultSchema], HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def search_parts(search_service: SearchService = Provide[ServiceContainer.search_service]):
    """Find parts by vehicle and name, grouped by seller.

    Searches from signed-in users are logged; anonymous searches are not.
    """
    data = SearchRequestSchema.model_validate(request.get_json())

    if data.user_id is not None:
        search_service.log_search(
            user_id=data.user_id,
            vehicle_make=data.vehicle_make,
            vehicle_model=data.vehicle_model,
            vehicle_year=data.vehicle_year,
            part_name=data.part_name,
            image_url=data.image_url
        )

    results = search_service.search_parts(
        vehicle_make=data.vehicle_make,
        vehicle_model=data.vehicle_model,
        vehicle_year=data.vehicle_year,
        part_name=data.part_name
    )
    return [SearchResultSchema.model_validate(result).model_dump() for result in results]


@search_bp.route("/searches/<int:user_id>", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=list[SearchResponseSchema], HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def list_user_searches(user_id: int, search_service: SearchService = Provide[ServiceContainer.search_service]):
    """List a user's search history, newest first."""
    searches = search_service.get_user_searches(user_id)
    return [SearchResponseSchema.model_validate(search).model_dump() for search in searches]
