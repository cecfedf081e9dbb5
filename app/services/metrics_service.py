"""Prometheus metrics service for collecting and exposing application metrics."""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from prometheus_client import Counter, Gauge, Histogram, generate_latest

if TYPE_CHECKING:
    from app.services.container import ServiceContainer

logger = logging.getLogger(__name__)


class MetricsServiceProtocol(ABC):
    """Protocol for metrics service implementations."""

    @abstractmethod
    def initialize_metrics(self):
        """Initialize metric objects."""
        pass

    @abstractmethod
    def update_marketplace_metrics(self):
        """Refresh marketplace gauges from the database."""
        pass

    @abstractmethod
    def record_search(self, seller_count: int):
        """Record a part search and how many sellers matched."""
        pass

    @abstractmethod
    def record_review_created(self, rating: Decimal):
        """Record a submitted seller review."""
        pass

    @abstractmethod
    def record_contact(self, contact_type: str):
        """Record a buyer contacting a seller."""
        pass

    @abstractmethod
    def record_upload(self, outcome: str):
        """Record an image upload attempt."""
        pass

    @abstractmethod
    def get_metrics_text(self) -> str:
        """Get metrics in Prometheus text format."""
        pass


class MetricsService(MetricsServiceProtocol):
    """Service class for Prometheus metrics collection and exposure."""

    def __init__(self, container: "ServiceContainer"):
        """Initialize service with container reference and metric objects.

        Args:
            container: Service container for accessing other services
        """
        self.container = container

        # Initialize metric objects
        self.initialize_metrics()

    def initialize_metrics(self):
        """Define all Prometheus metric objects."""
        # Check if already initialized (for container singleton reuse)
        if hasattr(self, 'marketplace_total_sellers'):
            return

        # Marketplace gauges
        self.marketplace_total_sellers = Gauge(
            'marketplace_total_sellers',
            'Total registered sellers'
        )
        self.marketplace_total_parts = Gauge(
            'marketplace_total_parts',
            'Total listed parts'
        )
        self.marketplace_total_searches = Gauge(
            'marketplace_total_searches',
            'Total logged searches'
        )
        self.marketplace_pending_verifications = Gauge(
            'marketplace_pending_verifications',
            'Sellers awaiting verification'
        )

        # Activity metrics
        self.search_requests_total = Counter(
            'marketplace_search_requests_total',
            'Part searches performed'
        )
        self.search_matching_sellers = Histogram(
            'marketplace_search_matching_sellers',
            'Number of sellers matched per search',
            buckets=(0, 1, 2, 5, 10, 25, 50)
        )
        self.reviews_created_total = Counter(
            'marketplace_reviews_created_total',
            'Seller reviews submitted'
        )
        self.review_rating = Histogram(
            'marketplace_review_rating',
            'Ratings given in submitted reviews',
            buckets=(1, 2, 3, 4, 5)
        )
        self.contacts_total = Counter(
            'marketplace_contacts_total',
            'Buyer contact events by channel',
            ['type']
        )
        self.uploads_total = Counter(
            'marketplace_uploads_total',
            'Image uploads by outcome',
            ['outcome']
        )

    def update_marketplace_metrics(self):
        """Update marketplace gauges with current database values."""
        if not self.container:
            return

        try:
            stats = self.container.analytics_service().get_analytics()

            self.marketplace_total_sellers.set(stats['total_sellers'])
            self.marketplace_total_parts.set(stats['total_parts'])
            self.marketplace_total_searches.set(stats['total_searches'])
            self.marketplace_pending_verifications.set(stats['pending_verifications'])

        except Exception as e:
            logger.error(f"Error updating marketplace metrics: {e}")

    def record_search(self, seller_count: int):
        self.search_requests_total.inc()
        self.search_matching_sellers.observe(seller_count)

    def record_review_created(self, rating: Decimal):
        self.reviews_created_total.inc()
        self.review_rating.observe(float(rating))

    def record_contact(self, contact_type: str):
        self.contacts_total.labels(type=contact_type).inc()

    def record_upload(self, outcome: str):
        self.uploads_total.labels(outcome=outcome).inc()

    def get_metrics_text(self) -> str:
        """Generate metrics in Prometheus text format.

        Gauges are refreshed right before rendering.

        Returns:
            Metrics data in Prometheus exposition format
        """
        self.update_marketplace_metrics()
        return generate_latest().decode('utf-8')
