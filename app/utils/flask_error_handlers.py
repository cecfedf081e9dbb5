"""Flask application error handlers."""

from flask import Flask, jsonify
from flask.wrappers import Response
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException


def _json_error(error: str, message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": error, "details": {"message": message}}), status


def register_error_handlers(app: Flask) -> None:
    """Register Flask error handlers for errors raised outside API views.

    Views decorated with handle_api_errors never reach these; they cover
    unknown routes, wrong methods, the upload file route and anything that
    escapes a view. Bodies use the same {error, details} shape.
    """

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        return jsonify({
            "error": "Validation failed",
            "details": [
                {"field": ".".join(str(x) for x in err["loc"]), "message": err["msg"]}
                for err in error.errors()
            ]
        }), 400

    @app.errorhandler(404)
    def handle_not_found(error: HTTPException):
        return _json_error("Resource not found", "The requested resource could not be found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error: HTTPException):
        return _json_error("Method not allowed", "The HTTP method is not allowed for this endpoint", 405)

    @app.errorhandler(500)
    def handle_internal_server_error(error: HTTPException):
        return _json_error("Internal server error", "An unexpected error occurred", 500)
