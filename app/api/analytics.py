"""Admin analytics API endpoints."""

from dependency_injector.wiring import Provide, inject
from flask import Blueprint
from spectree import Response as SpectreeResponse

from app.schemas.analytics import AnalyticsSchema
from app.services.analytics_service import AnalyticsService
from app.services.container import ServiceContainer
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

analytics_bp = Blueprint("analytics", __name__, url_prefix="/analytics")


@analytics_bp.route("", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=AnalyticsSchema))
@handle_api_errors
@inject
def get_analytics(analytics_service: AnalyticsService = Provide[ServiceContainer.analytics_service]):
    """Get marketplace counters for the admin dashboard."""
    stats = analytics_service.get_analytics()
    return AnalyticsSchema.model_validate(stats).model_dump()
