"""Analytics service for aggregating admin dashboard counters."""

from sqlalchemy import func, select

from app.models.part import Part
from app.models.search import Search
from app.models.seller import Seller
from app.services.base import BaseService


class AnalyticsService(BaseService):
    """Service class for marketplace-wide statistics."""

    def get_analytics(self) -> dict:
        """Returns marketplace counters.

        Returns:
            Dictionary containing total sellers, total parts, total logged
            searches and the number of sellers awaiting verification.
        """
        total_sellers = self.db.execute(select(func.count(Seller.id))).scalar() or 0
        total_parts = self.db.execute(select(func.count(Part.id))).scalar() or 0
        total_searches = self.db.execute(select(func.count(Search.id))).scalar() or 0

        pending_stmt = select(func.count(Seller.id)).where(Seller.verified.is_(False))
        pending_verifications = self.db.execute(pending_stmt).scalar() or 0

        return {
            'total_sellers': total_sellers,
            'total_parts': total_parts,
            'total_searches': total_searches,
            'pending_verifications': pending_verifications,
        }
