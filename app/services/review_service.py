"""Review service keeping each seller's rating aggregate in sync."""

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import func, select

from app.exceptions import RecordNotFoundException
from app.models.review import Review
from app.models.seller import Seller
from app.services.base import BaseService
from app.services.metrics_service import MetricsServiceProtocol
from app.services.seller_service import SellerService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

_RATING_QUANTUM = Decimal("0.01")


class ReviewService(BaseService):
    """Service for seller reviews.

    Seller.rating and Seller.review_count are derived values: they are
    recomputed from all stored reviews inside the transaction that inserts a
    review, with the seller row locked so concurrent reviews serialize.
    """

    def __init__(
        self,
        db,
        user_service: UserService,
        seller_service: SellerService,
        metrics_service: MetricsServiceProtocol,
    ):
        super().__init__(db)
        self.user_service = user_service
        self.seller_service = seller_service
        self.metrics_service = metrics_service

    def create_review(
        self,
        user_id: int,
        seller_id: int,
        rating: Decimal,
        comment: str | None = None,
    ) -> Review:
        """Store a review and refresh the seller's rating aggregate.

        Raises:
            RecordNotFoundException: If the user or seller does not exist
        """
        self.user_service.get_user(user_id)
        seller = self._lock_seller(seller_id)

        review = Review(
            user_id=user_id,
            seller_id=seller_id,
            rating=rating,
            comment=comment,
        )
        self.db.add(review)
        self.db.flush()

        self._recompute_rating(seller)
        self.metrics_service.record_review_created(rating)
        return review

    def get_seller_reviews(self, seller_id: int) -> list[Review]:
        """Get reviews of a seller, newest first.

        Raises:
            RecordNotFoundException: If the seller does not exist
        """
        self.seller_service.get_seller(seller_id)
        stmt = select(Review).where(Review.seller_id == seller_id).order_by(Review.id.desc())
        return list(self.db.scalars(stmt).all())

    def _lock_seller(self, seller_id: int) -> Seller:
        # FOR UPDATE is silently dropped on SQLite
        stmt = select(Seller).where(Seller.id == seller_id).with_for_update()
        seller = self.db.scalar(stmt)
        if not seller:
            raise RecordNotFoundException("Seller", seller_id)
        return seller

    def _recompute_rating(self, seller: Seller) -> None:
        average, count = self.db.execute(
            select(func.avg(Review.rating), func.count(Review.id)).where(
                Review.seller_id == seller.id
            )
        ).one()

        if count:
            seller.rating = Decimal(str(average)).quantize(_RATING_QUANTUM, rounding=ROUND_HALF_UP)
        else:
            seller.rating = Decimal("0.00")
        seller.review_count = count
        self.db.flush()

        logger.info(
            "Seller %s rating is now %s over %d review(s)", seller.id, seller.rating, count
        )
