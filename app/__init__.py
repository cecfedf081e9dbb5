"""Flask application factory for the Parts Marketplace backend."""

import logging
from typing import TYPE_CHECKING

from flask_cors import CORS

if TYPE_CHECKING:
    from app.config import Settings

from app.app import App
from app.config import get_settings
from app.extensions import db
from app.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def create_app(settings: "Settings | None" = None) -> App:
    """Create and configure Flask application."""
    app = App(__name__)

    # Load configuration
    if settings is None:
        settings = get_settings()

    app.config.from_object(settings)

    # Initialize extensions
    db.init_app(app)

    # Import models to register them with SQLAlchemy
    from app import models  # noqa: F401

    # Initialize SessionLocal for per-request sessions
    # This needs to be done in app context since db.engine requires it
    with app.app_context():
        from sqlalchemy.orm import Session, sessionmaker

        from app.database import register_sqlite_functions

        register_sqlite_functions(db.engine)

        SessionLocal: sessionmaker[Session] = sessionmaker(
            class_=Session,
            bind=db.engine,
            autoflush=True,
            expire_on_commit=False,
        )

    # Initialize SpecTree for OpenAPI docs
    from app.utils.spectree_config import configure_spectree

    configure_spectree(app)

    # Initialize service container after SpecTree
    container = ServiceContainer()
    container.config.override(settings)
    container.session_maker.override(SessionLocal)

    # Wire container with API modules
    wire_modules = [
        'app.api.analytics', 'app.api.auth', 'app.api.contacts', 'app.api.metrics',
        'app.api.parts', 'app.api.reviews', 'app.api.search', 'app.api.sellers',
        'app.api.uploads', 'app.api.users'
    ]

    container.wire(modules=wire_modules)

    app.container = container

    # Configure CORS
    CORS(app, origins=settings.CORS_ORIGINS)

    # Initialize Flask-Log-Request-ID for correlation tracking
    from flask_log_request_id import RequestID
    RequestID(app)

    # Register error handlers
    from app.utils.flask_error_handlers import register_error_handlers

    register_error_handlers(app)

    # Register main API blueprint
    from app.api import api_bp

    app.register_blueprint(api_bp)

    # Stored images are served from /uploads, outside the API prefix
    from app.api.uploads import uploaded_files_bp
    app.register_blueprint(uploaded_files_bp)

    @app.teardown_request
    def close_session(exc: Exception | None) -> None:
        """Close the database session after each request."""
        try:
            db_session = container.db_session()
            needs_rollback = db_session.info.get('needs_rollback', False)

            if exc or needs_rollback:
                db_session.rollback()
            else:
                db_session.commit()

            # Clear rollback flag after processing
            db_session.info.pop('needs_rollback', None)
            db_session.close()

        finally:
            # Ensure the scoped session is removed after each request
            container.db_session.reset()

    with app.app_context():
        if settings.AUTO_CREATE_SCHEMA:
            from app.database import init_db
            init_db()
            app.logger.info("Database schema created")

        if settings.SEED_DEMO_DATA:
            _seed_demo_data(container)

    return app


def _seed_demo_data(container: ServiceContainer) -> None:
    """Load the demo dataset unless the database already holds users."""
    try:
        test_data_service = container.test_data_service()
        if test_data_service.is_database_empty():
            test_data_service.load_demo_dataset()
        else:
            logger.info("Database already populated; skipping demo data")
    finally:
        container.db_session().close()
        container.db_session.reset()
