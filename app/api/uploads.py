"""Image upload API endpoints and the public upload file route."""

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request, send_from_directory
from spectree import Response as SpectreeResponse

from app.config import Settings
from app.schemas.common import ErrorResponseSchema
from app.schemas.upload import ImageUploadResponseSchema
from app.services.container import ServiceContainer
from app.services.upload_service import UploadService
from app.utils.error_handling import handle_api_errors
from app.utils.spectree_config import api

uploads_bp = Blueprint("uploads", __name__, url_prefix="/upload")

# Registered on the app itself; stored images are served outside /api
uploaded_files_bp = Blueprint("uploaded_files", __name__, url_prefix="/uploads")


@uploads_bp.route("/search-image", methods=["POST"])
@api.validate(resp=SpectreeResponse(HTTP_200=ImageUploadResponseSchema, HTTP_400=ErrorResponseSchema))
@handle_api_errors
@inject
def upload_search_image(upload_service: UploadService = Provide[ServiceContainer.upload_service]):
    """Store an image for image-assisted search and return its URL."""
    image_url = upload_service.save_image(request.files.get('image'), 'image')
    return ImageUploadResponseSchema(image_url=image_url).model_dump()


@uploaded_files_bp.route("/<path:filename>", methods=["GET"])
@inject
def serve_upload(filename: str, settings: Settings = Provide[ServiceContainer.config]):
    """Serve a previously stored image."""
    return send_from_directory(settings.UPLOAD_FOLDER, filename)
