"""Centralized error handling utilities."""

import functools
import logging
from collections.abc import Callable
from typing import Any

from flask import current_app, jsonify
from flask.wrappers import Response
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest, UnsupportedMediaType

from app.exceptions import (
    AuthenticationException,
    BusinessLogicException,
    InvalidOperationException,
    InvalidUploadException,
    RecordNotFoundException,
    ResourceConflictException,
)
from app.utils import get_current_correlation_id

logger = logging.getLogger(__name__)


def _mark_session_for_rollback() -> None:
    """Flag the request session so teardown rolls back instead of committing."""
    container = getattr(current_app, "container", None)
    if container is not None:
        container.db_session().info['needs_rollback'] = True


def handle_api_errors(func: Callable[..., Any]) -> Callable[..., Response | tuple[Response | str, int]]:
    """Decorator to handle common API errors consistently.

    Handles ValidationError, domain exceptions, IntegrityError, and generic
    exceptions with appropriate HTTP status codes and error messages. Any
    handled error marks the request session for rollback.
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            _mark_session_for_rollback()
            return _error_response(e)

    return wrapper


def _error_response(e: Exception) -> tuple[Response, int]:
    if isinstance(e, (BadRequest, UnsupportedMediaType)):
        # Malformed or non-JSON bodies from request.get_json()
        return jsonify({
            "error": "Invalid JSON",
            "details": {"message": "Request body must be valid JSON"}
        }), 400

    if isinstance(e, ValidationError):
        # Pydantic validation errors
        error_details = []
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"])
            message = error["msg"]
            error_details.append({
                "message": message,
                "field": field
            })

        return jsonify({
            "error": "Validation failed",
            "details": error_details
        }), 400

    if isinstance(e, RecordNotFoundException):
        return jsonify({
            "error": e.message,
            "details": {"message": "The requested resource could not be found"}
        }), 404

    if isinstance(e, ResourceConflictException):
        return jsonify({
            "error": e.message,
            "details": {"message": "A resource with those details already exists"}
        }), 409

    if isinstance(e, InvalidOperationException):
        return jsonify({
            "error": e.message,
            "details": {"message": "The requested operation cannot be performed"}
        }), 409

    if isinstance(e, AuthenticationException):
        return jsonify({
            "error": e.message,
            "details": {"message": "Username or password is incorrect"}
        }), 401

    if isinstance(e, InvalidUploadException):
        return jsonify({
            "error": e.message,
            "details": {"message": e.cause}
        }), 400

    if isinstance(e, BusinessLogicException):
        # Fallback for other domain exceptions
        return jsonify({
            "error": e.message,
            "details": {"message": "The request could not be processed"}
        }), 400

    if isinstance(e, IntegrityError):
        # Database constraint violations
        error_msg = str(e.orig) if hasattr(e, 'orig') else str(e)

        # Map common constraint violations to user-friendly messages
        if "UNIQUE constraint failed" in error_msg or "duplicate key" in error_msg.lower():
            return jsonify({
                "error": "Resource already exists",
                "details": {"message": "A record with these values already exists"}
            }), 409
        elif "FOREIGN KEY constraint failed" in error_msg or "foreign key" in error_msg.lower():
            return jsonify({
                "error": "Invalid reference",
                "details": {"message": "Referenced resource does not exist"}
            }), 400
        elif "NOT NULL constraint failed" in error_msg or "null value" in error_msg.lower():
            return jsonify({
                "error": "Missing required field",
                "details": {"message": "Required field cannot be empty"}
            }), 400
        else:
            return jsonify({
                "error": "Database constraint violation",
                "details": {"message": "The operation violates a database constraint"}
            }), 400

    logger.error(
        "Unhandled error while processing request %s",
        get_current_correlation_id(),
        exc_info=e,
    )
    return jsonify({
        "error": "Internal server error",
        "details": {"message": str(e)}
    }), 500
