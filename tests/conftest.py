"""Pytest configuration and fixtures."""

import sqlite3
from collections.abc import Generator
from decimal import Decimal
from io import BytesIO
from pathlib import Path

import pytest
from flask import Flask
from PIL import Image
from prometheus_client import REGISTRY
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app import create_app
from app.config import Settings
from app.database import init_db
from app.models.part import Part
from app.models.seller import Seller
from app.models.user import User, UserRole
from app.services.container import ServiceContainer


@pytest.fixture(autouse=True)
def clear_prometheus_registry():
    """Clear Prometheus registry before and after each test to ensure isolation.

    Each test app builds its own MetricsService, and metrics cannot be
    registered twice in the same registry.
    """
    # Clear collectors before test
    collectors = list(REGISTRY._collector_to_names.keys())
    for collector in collectors:
        try:
            REGISTRY.unregister(collector)
        except (KeyError, ValueError):
            # Collector may have already been unregistered or not exist
            pass
    yield
    # Clean up after test
    collectors = list(REGISTRY._collector_to_names.keys())
    for collector in collectors:
        try:
            REGISTRY.unregister(collector)
        except (KeyError, ValueError):
            pass


def _build_test_settings(upload_folder: Path | None = None) -> Settings:
    """Construct base Settings object for tests."""
    settings = Settings(
        DATABASE_URL="sqlite:///:memory:",
        SECRET_KEY="test-secret-key",
        DEBUG=True,
        FLASK_ENV="testing",
        CORS_ORIGINS=["http://localhost:3000"],
        AUTO_CREATE_SCHEMA=False,
        SEED_DEMO_DATA=False,
        MAX_IMAGE_SIZE=1024 * 1024,  # 1MB
    )
    if upload_folder is not None:
        settings.UPLOAD_FOLDER = str(upload_folder)
    return settings


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Create test settings with in-memory database and a temporary upload folder."""
    return _build_test_settings(tmp_path / "uploads")


@pytest.fixture(scope="session")
def template_connection(tmp_path_factory: pytest.TempPathFactory) -> Generator[sqlite3.Connection, None, None]:
    """Create a template SQLite database once with the full schema."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)

    settings = _build_test_settings(tmp_path_factory.mktemp("template-uploads"))
    settings.DATABASE_URL = "sqlite://"
    settings.set_engine_options_override({
        "poolclass": StaticPool,
        "creator": lambda: conn,
    })

    template_app = create_app(settings)
    with template_app.app_context():
        init_db()

    yield conn

    conn.close()


@pytest.fixture
def app(test_settings: Settings, template_connection: sqlite3.Connection) -> Generator[Flask, None, None]:
    """Create Flask app for testing using a fresh copy of the template database."""
    clone_conn = sqlite3.connect(":memory:", check_same_thread=False)
    template_connection.backup(clone_conn)

    settings = test_settings.model_copy()
    settings.DATABASE_URL = "sqlite://"
    settings.set_engine_options_override({
        "poolclass": StaticPool,
        "creator": lambda: clone_conn,
    })

    app = create_app(settings)

    try:
        yield app
    finally:
        with app.app_context():
            from app.extensions import db as flask_db

            flask_db.session.remove()

        clone_conn.close()


@pytest.fixture
def session(container: ServiceContainer) -> Generator[Session, None, None]:
    """Create a new database session for a test."""

    session = container.db_session()

    exc = None
    try:
        yield session
    except Exception as e:
        exc = e

    if exc:
        session.rollback()
    else:
        session.commit()
    session.close()

    container.db_session.reset()


@pytest.fixture
def client(app: Flask):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def container(app: Flask) -> ServiceContainer:
    """Access to the DI container for testing."""
    return app.container


# Marketplace fixtures


@pytest.fixture
def make_user(container: ServiceContainer, session: Session):
    """Factory creating users with unique names."""
    counter = {"n": 0}

    def _make_user(username: str | None = None, role: UserRole = UserRole.BUYER, password: str = "secret") -> User:
        counter["n"] += 1
        name = username or f"user{counter['n']}"
        return container.user_service().create_user(
            username=name,
            password=password,
            email=f"{name}@example.com",
            role=role,
        )

    return _make_user


@pytest.fixture
def make_seller(container: ServiceContainer, make_user):
    """Factory creating a seller together with its owning user."""
    counter = {"n": 0}

    def _make_seller(shop_name: str | None = None, **kwargs) -> Seller:
        counter["n"] += 1
        owner = make_user(f"dealer{counter['n']}", role=UserRole.SELLER)
        return container.seller_service().create_seller(
            user_id=owner.id,
            shop_name=shop_name or f"Shop {counter['n']}",
            address=kwargs.pop("address", "Shop 45, Abossey Okai Market"),
            phone=kwargs.pop("phone", "+233201234567"),
            **kwargs,
        )

    return _make_seller


@pytest.fixture
def make_part(container: ServiceContainer):
    """Factory creating parts for a seller."""

    def _make_part(seller: Seller, name: str = "Brake Pads", **kwargs) -> Part:
        return container.part_service().create_part(
            seller_id=seller.id,
            name=name,
            price=kwargs.pop("price", Decimal("100.00")),
            **kwargs,
        )

    return _make_part


def _image_bytes(image_format: str = "PNG", size: tuple[int, int] = (8, 8)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """A small, valid PNG image."""
    return _image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A small, valid JPEG image."""
    return _image_bytes("JPEG")
