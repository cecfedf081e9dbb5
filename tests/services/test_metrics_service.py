"""Tests for MetricsService."""

from decimal import Decimal

from flask import Flask
from prometheus_client import REGISTRY
from sqlalchemy.orm import Session

from app.models.contact import ContactType
from app.services.container import ServiceContainer


def _sample(name: str, labels: dict[str, str] | None = None) -> float | None:
    return REGISTRY.get_sample_value(name, labels or {})


class TestMetricsService:
    """Test cases for marketplace metrics."""

    def test_singleton(self, app: Flask, container: ServiceContainer):
        assert container.metrics_service() is container.metrics_service()

    def test_search_metrics(self, app: Flask, session: Session, container: ServiceContainer, make_seller, make_part):
        seller = make_seller()
        make_part(seller, "Brake Pads")
        service = container.search_service()

        service.search_parts(part_name="brake")
        service.search_parts(part_name="nothing matches")

        assert _sample("marketplace_search_requests_total") == 2
        assert _sample("marketplace_search_matching_sellers_count") == 2
        assert _sample("marketplace_search_matching_sellers_sum") == 1

    def test_review_metrics(
        self, app: Flask, session: Session, container: ServiceContainer, make_seller, make_user
    ):
        seller = make_seller()
        buyer = make_user()

        container.review_service().create_review(buyer.id, seller.id, Decimal("4.5"))

        assert _sample("marketplace_reviews_created_total") == 1
        assert _sample("marketplace_review_rating_sum") == 4.5

    def test_contact_metrics(
        self, app: Flask, session: Session, container: ServiceContainer, make_seller, make_user
    ):
        seller = make_seller()
        buyer = make_user()
        service = container.contact_service()

        service.create_contact(buyer.id, seller.id, ContactType.WHATSAPP)
        service.create_contact(buyer.id, seller.id, ContactType.WHATSAPP)
        service.create_contact(buyer.id, seller.id, ContactType.CALL)

        assert _sample("marketplace_contacts_total", {"type": "whatsapp"}) == 2
        assert _sample("marketplace_contacts_total", {"type": "call"}) == 1

    def test_gauges_refresh_on_render(
        self, app: Flask, session: Session, container: ServiceContainer, make_seller, make_part
    ):
        """Test that rendering the exposition text refreshes the marketplace gauges."""
        seller = make_seller()
        make_seller()
        container.seller_service().verify_seller(seller.id)
        make_part(seller)

        text = container.metrics_service().get_metrics_text()

        assert "marketplace_total_sellers 2.0" in text
        assert "marketplace_total_parts 1.0" in text
        assert "marketplace_pending_verifications 1.0" in text
        assert "marketplace_total_searches 0.0" in text

    def test_holds_owning_container(self, app: Flask, container: ServiceContainer):
        assert container.metrics_service().container is container

    def test_update_marketplace_metrics_sets_gauges(
        self, app: Flask, session: Session, container: ServiceContainer, make_seller
    ):
        make_seller()

        container.metrics_service().update_marketplace_metrics()

        assert _sample("marketplace_total_sellers") == 1
        assert _sample("marketplace_pending_verifications") == 1
