"""Part listing model for the marketplace."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import ForeignKey, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.extensions import db

if TYPE_CHECKING:
    from app.models.seller import Seller


class Availability(str, Enum):
    """Stock state of a part listing."""

    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class Part(db.Model):  # type: ignore[name-defined]
    """Model representing a single inventory listing owned by a seller."""

    __tablename__ = "parts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    seller_id: Mapped[int] = mapped_column(
        ForeignKey("sellers.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    # Vehicle fitment; vehicle_year may hold a range such as "2020-2023"
    vehicle_make: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    vehicle_model: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    vehicle_year: Mapped[str | None] = mapped_column(String(50), nullable=True)

    availability: Mapped[Availability] = mapped_column(
        SQLEnum(
            Availability,
            name="part_availability",
            values_callable=lambda enum_cls: [item.value for item in enum_cls],
            native_enum=False,
        ),
        nullable=False,
        default=Availability.IN_STOCK,
        server_default=Availability.IN_STOCK.value,
    )
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now()
    )

    seller: Mapped["Seller"] = relationship("Seller", back_populates="parts")

    def __repr__(self) -> str:
        return f"<Part {self.id}: {self.name}>"
