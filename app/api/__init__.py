"""API blueprints for the Parts Marketplace."""

from flask import Blueprint

# Create main API blueprint
api_bp = Blueprint("api", __name__, url_prefix="/api")


# Import and register all resource blueprints
# Note: Imports are done after api_bp creation to avoid circular imports
from app.api.analytics import analytics_bp  # noqa: E402
from app.api.auth import auth_bp  # noqa: E402
from app.api.contacts import contacts_bp  # noqa: E402
from app.api.health import health_bp  # noqa: E402
from app.api.metrics import metrics_bp  # noqa: E402
from app.api.parts import parts_bp  # noqa: E402
from app.api.reviews import reviews_bp  # noqa: E402
from app.api.search import search_bp  # noqa: E402
from app.api.sellers import sellers_bp  # noqa: E402
from app.api.uploads import uploads_bp  # noqa: E402
from app.api.users import users_bp  # noqa: E402

api_bp.register_blueprint(analytics_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(auth_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(contacts_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(health_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(metrics_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(parts_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(reviews_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(search_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(sellers_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(uploads_bp)  # type: ignore[attr-defined]
api_bp.register_blueprint(users_bp)  # type: ignore[attr-defined]
