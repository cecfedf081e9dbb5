from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, ForeignKey, Numeric, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.extensions import db

if TYPE_CHECKING:
    from app.models.contact import Contact
    from app.models.part import Part
    from app.models.review import Review
    from app.models.user import User


class Seller(db.Model):  # type: ignore[name-defined]
    __tablename__ = "sellers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), unique=True, nullable=False
    )
    shop_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    whatsapp: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    # Derived from reviews; only ReviewService writes these.
    rating: Mapped[Decimal] = mapped_column(
        Numeric(3, 2), nullable=False, default=Decimal("0.00"), server_default="0"
    )
    review_count: Mapped[int] = mapped_column(
        nullable=False, default=0, server_default="0"
    )
    created_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now()
    )

    user: Mapped["User"] = relationship("User", back_populates="seller")
    parts: Mapped[list["Part"]] = relationship(
        "Part", back_populates="seller", order_by="Part.id"
    )
    reviews: Mapped[list["Review"]] = relationship(
        "Review", back_populates="seller"
    )
    contacts: Mapped[list["Contact"]] = relationship(
        "Contact", back_populates="seller"
    )

    def __repr__(self) -> str:
        return f"<Seller(id={self.id}, shop_name='{self.shop_name}', verified={self.verified})>"
