"""Contact event model."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.extensions import db

if TYPE_CHECKING:
    from app.models.seller import Seller
    from app.models.user import User


class ContactType(str, Enum):
    """Ways a buyer reached out to a seller."""

    WHATSAPP = "whatsapp"
    CALL = "call"
    PROFILE_VIEW = "profile_view"


class Contact(db.Model):  # type: ignore[name-defined]
    """Event log entry for a buyer contacting a seller."""

    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    seller_id: Mapped[int] = mapped_column(
        ForeignKey("sellers.id"), nullable=False, index=True
    )
    type: Mapped[ContactType] = mapped_column(
        SQLEnum(
            ContactType,
            name="contact_type",
            values_callable=lambda enum_cls: [item.value for item in enum_cls],
            native_enum=False,
        ),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now()
    )

    user: Mapped["User"] = relationship("User")
    seller: Mapped["Seller"] = relationship("Seller", back_populates="contacts")

    def __repr__(self) -> str:
        return f"<Contact {self.id}: {self.type.value} user={self.user_id} seller={self.seller_id}>"
