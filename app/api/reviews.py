"""Seller review API endpoints."""

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.review import ReviewCreateSchema, ReviewResponseSchema
from app.services.container import ServiceContainer
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

reviews_bp = Blueprint("reviews", __name__, url_prefix="/reviews")


@reviews_bp.route("", methods=["POST"])
@api.validate(json=ReviewCreateSchema, resp=SpectreeResponse(HTTP_201=ReviewResponseSchema, HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def create_review(review_service=Provide[ServiceContainer.review_service]):
    """Submit a review; the seller's rating and review count are refreshed."""
    data = ReviewCreateSchema.model_validate(request.get_json())
    review = review_service.create_review(
        user_id=data.user_id,
        seller_id=data.seller_id,
        rating=data.rating,
        comment=data.comment
    )
    return ReviewResponseSchema.model_validate(review).model_dump(), 201


@reviews_bp.route("/<int:seller_id>", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=list[ReviewResponseSchema], HTTP_404=ErrorResponseSchema))
@handle_api_errors
@inject
def list_seller_reviews(seller_id: int, review_service=Provide[ServiceContainer.review_service]):
    """List reviews of a seller, newest first."""
    reviews = review_service.get_seller_reviews(seller_id)
    return [ReviewResponseSchema.model_validate(review).model_dump() for review in reviews]
