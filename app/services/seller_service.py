"""Seller service for shop profiles and verification."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from app.exceptions import (
    InvalidOperationException,
    RecordNotFoundException,
    ResourceConflictException,
)
from app.models.contact import Contact
from app.models.seller import Seller
from app.services.base import BaseService
from app.services.user_service import UserService

_UPDATABLE_FIELDS = ("shop_name", "description", "address", "phone", "whatsapp", "location")


class SellerService(BaseService):
    """Service for managing seller shops and their verification."""

    def __init__(self, db, user_service: UserService):
        super().__init__(db)
        self.user_service = user_service

    def create_seller(
        self,
        user_id: int,
        shop_name: str,
        address: str,
        phone: str,
        description: str | None = None,
        whatsapp: str | None = None,
        location: dict[str, float] | None = None,
    ) -> Seller:
        """Create a new, unverified seller with no reviews.

        Args:
            user_id: ID of the owning user
            shop_name: Shop name
            address: Physical address
            phone: Phone number
            description: Optional shop description
            whatsapp: Optional WhatsApp number
            location: Optional {"lat", "lng"} map position

        Returns:
            Created Seller instance

        Raises:
            RecordNotFoundException: If the user does not exist
            ResourceConflictException: If the user already owns a shop
        """
        self.user_service.get_user(user_id)

        if self.db.scalar(select(Seller.id).where(Seller.user_id == user_id)) is not None:
            raise ResourceConflictException("seller", f"user {user_id}")

        try:
            seller = Seller(
                user_id=user_id,
                shop_name=shop_name,
                address=address,
                phone=phone,
                description=description,
                whatsapp=whatsapp,
                location=location,
            )
            self.db.add(seller)
            self.db.flush()
            return seller
        except IntegrityError as e:
            self.db.rollback()
            raise ResourceConflictException("seller", f"user {user_id}") from e

    def get_seller(self, seller_id: int) -> Seller:
        """Get a seller by ID.

        Raises:
            RecordNotFoundException: If seller not found
        """
        seller = self.db.scalar(select(Seller).where(Seller.id == seller_id))
        if not seller:
            raise RecordNotFoundException("Seller", seller_id)
        return seller

    def get_seller_detail(self, seller_id: int) -> Seller:
        """Get a seller with its part catalogue and owner loaded.

        Raises:
            RecordNotFoundException: If seller not found
        """
        stmt = (
            select(Seller)
            .options(selectinload(Seller.parts), selectinload(Seller.user))
            .where(Seller.id == seller_id)
        )
        seller = self.db.scalar(stmt)
        if not seller:
            raise RecordNotFoundException("Seller", seller_id)
        return seller

    def get_seller_by_user(self, user_id: int) -> Seller:
        """Get the shop owned by a user, with parts and owner loaded.

        Raises:
            RecordNotFoundException: If the user owns no shop
        """
        stmt = (
            select(Seller)
            .options(selectinload(Seller.parts), selectinload(Seller.user))
            .where(Seller.user_id == user_id)
        )
        seller = self.db.scalar(stmt)
        if not seller:
            raise RecordNotFoundException("Seller for user", user_id)
        return seller

    def get_all_sellers(self) -> list[Seller]:
        """Get all sellers in registration order."""
        return list(self.db.scalars(select(Seller).order_by(Seller.id)).all())

    def get_pending_sellers(self) -> list[Seller]:
        """Get sellers still awaiting verification."""
        stmt = select(Seller).where(Seller.verified.is_(False)).order_by(Seller.id)
        return list(self.db.scalars(stmt).all())

    def update_seller(self, seller_id: int, **fields: Any) -> Seller:
        """Update seller profile fields.

        Only profile fields are accepted; verification state and the review
        aggregate cannot be written through this path.

        Raises:
            RecordNotFoundException: If seller not found
            InvalidOperationException: If a non-profile field is passed
        """
        seller = self.get_seller(seller_id)

        for field_name, value in fields.items():
            if field_name not in _UPDATABLE_FIELDS:
                raise InvalidOperationException("update seller", f"{field_name} is not editable")
            setattr(seller, field_name, value)

        self.db.flush()
        return seller

    def verify_seller(self, seller_id: int) -> Seller:
        """Mark a seller as verified. Verifying twice is a no-op."""
        seller = self.get_seller(seller_id)
        seller.verified = True
        self.db.flush()
        return seller

    def get_seller_contacts(self, seller_id: int) -> list[Contact]:
        """Get contact events for a seller, newest first."""
        self.get_seller(seller_id)
        stmt = (
            select(Contact)
            .where(Contact.seller_id == seller_id)
            .order_by(Contact.id.desc())
        )
        return list(self.db.scalars(stmt).all())
