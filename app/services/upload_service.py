"""Image upload service for part photos and search images."""

import logging
import secrets
import time
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from werkzeug.datastructures import FileStorage

from app.config import Settings
from app.exceptions import InvalidUploadException
from app.services.metrics_service import MetricsServiceProtocol

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"


class UploadService:
    """Validates uploaded images and stores them on local disk."""

    def __init__(self, settings: Settings, metrics_service: MetricsServiceProtocol):
        """Initialize upload service.

        Args:
            settings: Application settings with upload limits and folder
            metrics_service: Metrics sink for upload outcomes
        """
        self.settings = settings
        self.metrics_service = metrics_service
        self.upload_folder = Path(settings.UPLOAD_FOLDER)
        self._ensure_upload_directory()

    def _ensure_upload_directory(self):
        """Ensure the upload directory exists."""
        self.upload_folder.mkdir(parents=True, exist_ok=True)

    def save_image(self, file: FileStorage | None, field_name: str = "image") -> str:
        """Validate and store an uploaded image.

        Args:
            file: Uploaded file from the multipart request
            field_name: Form field name, used as the stored filename prefix

        Returns:
            Public URL of the stored image

        Raises:
            InvalidUploadException: If no file was sent, it is too large, or it is not an allowed image
        """
        try:
            if file is None or not file.filename:
                raise InvalidUploadException("no file uploaded")

            extension = Path(file.filename).suffix.lower()
            if extension not in self.settings.ALLOWED_IMAGE_EXTENSIONS:
                raise InvalidUploadException("only image files are allowed")

            data = file.stream.read(self.settings.MAX_IMAGE_SIZE + 1)
            self._validate_size(len(data))
            self._validate_image_content(data)

            filename = f"{field_name}-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{extension}"
            (self.upload_folder / filename).write_bytes(data)
        except InvalidUploadException as e:
            self.metrics_service.record_upload("rejected")
            logger.info("Rejected upload %r: %s", file.filename if file else None, e.cause)
            raise

        self.metrics_service.record_upload("stored")
        logger.info("Stored upload %s (%d bytes)", filename, len(data))
        return f"{UPLOAD_URL_PREFIX}/{filename}"

    def _validate_size(self, size: int) -> None:
        if size == 0:
            raise InvalidUploadException("the uploaded file is empty")
        if size > self.settings.MAX_IMAGE_SIZE:
            max_mb = self.settings.MAX_IMAGE_SIZE / (1024 * 1024)
            raise InvalidUploadException(f"file too large, maximum size: {max_mb:.1f}MB")

    def _validate_image_content(self, data: bytes) -> str:
        """Decode the image header with Pillow and check its MIME type."""
        try:
            with Image.open(BytesIO(data)) as img:
                image_format = img.format
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise InvalidUploadException("only image files are allowed") from e

        content_type = Image.MIME.get(image_format or "", "")
        if content_type not in self.settings.ALLOWED_IMAGE_TYPES:
            raise InvalidUploadException(f"image type not allowed: {content_type or image_format}")
        return content_type
