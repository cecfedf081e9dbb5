"""Seller review model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.extensions import db

if TYPE_CHECKING:
    from app.models.seller import Seller
    from app.models.user import User


class Review(db.Model):  # type: ignore[name-defined]
    """Buyer rating of a seller."""

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    seller_id: Mapped[int] = mapped_column(
        ForeignKey("sellers.id"), nullable=False, index=True
    )
    rating: Mapped[Decimal] = mapped_column(Numeric(2, 1), nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now()
    )

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
    )

    user: Mapped["User"] = relationship("User")
    seller: Mapped["Seller"] = relationship("Seller", back_populates="reviews")

    def __repr__(self) -> str:
        return f"<Review {self.id}: seller={self.seller_id} rating={self.rating}>"
