"""User account model."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.extensions import db

if TYPE_CHECKING:
    from app.models.search import Search
    from app.models.seller import Seller


class UserRole(str, Enum):
    """Roles a marketplace account can hold."""

    BUYER = "buyer"
    SELLER = "seller"
    ADMIN = "admin"


class User(db.Model):  # type: ignore[name-defined]
    """Marketplace account. Passwords are stored and compared as plain text."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        SQLEnum(
            UserRole,
            name="user_role",
            values_callable=lambda enum_cls: [item.value for item in enum_cls],
            native_enum=False,
        ),
        nullable=False,
        default=UserRole.BUYER,
        server_default=UserRole.BUYER.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now()
    )

    seller: Mapped[Seller | None] = relationship(
        "Seller", back_populates="user", uselist=False
    )
    searches: Mapped[list[Search]] = relationship(
        "Search", back_populates="user"
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role.value}>"
