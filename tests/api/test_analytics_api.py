"""Test analytics API endpoint."""

from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.orm import Session

from app.services.container import ServiceContainer


class TestAnalyticsAPI:
    """Test cases for GET /api/analytics."""

    def test_empty(self, app: Flask, client: FlaskClient, session: Session):
        response = client.get("/api/analytics")

        assert response.status_code == 200
        assert response.get_json() == {
            "total_sellers": 0,
            "total_parts": 0,
            "total_searches": 0,
            "pending_verifications": 0,
        }

    def test_demo_dataset(self, app: Flask, client: FlaskClient, session: Session, container: ServiceContainer):
        container.test_data_service().load_demo_dataset()

        response = client.get("/api/analytics")

        assert response.get_json() == {
            "total_sellers": 4,
            "total_parts": 11,
            "total_searches": 2,
            "pending_verifications": 1,
        }
