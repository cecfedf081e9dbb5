import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import select

from app.exceptions import InvalidOperationException, RecordNotFoundException
from app.models.part import Availability, Part
from app.services.base import BaseService
from app.services.seller_service import SellerService

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "name",
    "description",
    "price",
    "vehicle_make",
    "vehicle_model",
    "vehicle_year",
    "availability",
    "image_url",
)


class PartService(BaseService):
    """Service for managing seller inventory listings."""

    def __init__(self, db, seller_service: SellerService):
        super().__init__(db)
        self.seller_service = seller_service

    def create_part(
        self,
        seller_id: int,
        name: str,
        description: str | None = None,
        price: Decimal | None = None,
        vehicle_make: str | None = None,
        vehicle_model: str | None = None,
        vehicle_year: str | None = None,
        availability: Availability = Availability.IN_STOCK,
        image_url: str | None = None,
    ) -> Part:
        """Create a part listing for an existing seller.

        Raises:
            RecordNotFoundException: If the seller does not exist
        """
        seller = self.seller_service.get_seller(seller_id)

        part = Part(
            seller=seller,
            name=name,
            description=description,
            price=price,
            vehicle_make=vehicle_make,
            vehicle_model=vehicle_model,
            vehicle_year=vehicle_year,
            availability=availability,
            image_url=image_url,
        )
        self.db.add(part)
        self.db.flush()

        logger.info("Seller %s listed part %s (%s)", seller_id, part.id, name)
        return part

    def get_part(self, part_id: int) -> Part:
        """Get a part by ID.

        Raises:
            RecordNotFoundException: If part not found
        """
        part = self.db.scalar(select(Part).where(Part.id == part_id))
        if not part:
            raise RecordNotFoundException("Part", part_id)
        return part

    def get_parts(self, seller_id: int | None = None) -> list[Part]:
        """Get all parts, or only those of one seller, in listing order."""
        stmt = select(Part).order_by(Part.id)
        if seller_id is not None:
            stmt = stmt.where(Part.seller_id == seller_id)
        return list(self.db.scalars(stmt).all())

    def update_part(self, part_id: int, **fields: Any) -> Part:
        """Partially update a part listing.

        Raises:
            RecordNotFoundException: If part not found
            InvalidOperationException: If a non-editable field such as seller_id is passed
        """
        part = self.get_part(part_id)

        for field_name, value in fields.items():
            if field_name not in _UPDATABLE_FIELDS:
                raise InvalidOperationException("update part", f"{field_name} is not editable")
            setattr(part, field_name, value)

        self.db.flush()
        return part

    def delete_part(self, part_id: int) -> None:
        """Delete a part listing.

        Raises:
            RecordNotFoundException: If part not found
        """
        part = self.get_part(part_id)
        seller = part.seller

        self.db.delete(part)
        self.db.flush()

        # An already loaded catalogue still holds the deleted part
        self.db.expire(seller, ["parts"])

        logger.info("Deleted part %s of seller %s", part_id, seller.id)
