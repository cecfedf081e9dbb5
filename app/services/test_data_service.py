"""Test data service for loading the demo marketplace dataset from JSON files."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

from sqlalchemy import func, select

from app.exceptions import InvalidOperationException
from app.models.contact import ContactType
from app.models.part import Availability
from app.models.seller import Seller
from app.models.user import User, UserRole
from app.services.base import BaseService
from app.services.contact_service import ContactService
from app.services.part_service import PartService
from app.services.review_service import ReviewService
from app.services.search_service import SearchService
from app.services.seller_service import SellerService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data" / "test_data"


class TestDataService(BaseService):
    """Service class for loading fixed demo data from JSON files.

    Records are created through the regular domain services so the demo
    dataset obeys the same rules as API traffic: seller ratings come from
    the reviews and verification flags go through the verify operation.
    """

    def __init__(
        self,
        db,
        user_service: UserService,
        seller_service: SellerService,
        part_service: PartService,
        review_service: ReviewService,
        search_service: SearchService,
        contact_service: ContactService,
    ):
        super().__init__(db)
        self.user_service = user_service
        self.seller_service = seller_service
        self.part_service = part_service
        self.review_service = review_service
        self.search_service = search_service
        self.contact_service = contact_service

    def is_database_empty(self) -> bool:
        """Check whether no users have been created yet."""
        return (self.db.execute(select(func.count(User.id))).scalar() or 0) == 0

    def load_demo_dataset(self, data_dir: Path = DATA_DIR) -> dict[str, int]:
        """Load the complete demo dataset in dependency order.

        Returns:
            Number of records created per entity
        """
        users = self.load_users(data_dir)
        sellers = self.load_sellers(data_dir, users)
        parts = self.load_parts(data_dir, sellers)
        reviews = self.load_reviews(data_dir, users, sellers)
        searches = self.load_searches(data_dir, users)
        contacts = self.load_contacts(data_dir, users, sellers)

        # Commit all changes
        self.db.commit()

        stats = {
            "users": len(users),
            "sellers": len(sellers),
            "parts": parts,
            "reviews": reviews,
            "searches": searches,
            "contacts": contacts,
        }
        logger.info("Loaded demo dataset: %s", stats)
        return stats

    def load_users(self, data_dir: Path) -> dict[str, User]:
        """Load user accounts from users.json."""
        users_map: dict[str, User] = {}
        for user_data in self._read(data_dir, "users.json"):
            user = self.user_service.create_user(
                username=user_data["username"],
                password=user_data["password"],
                email=user_data["email"],
                role=UserRole(user_data.get("role", UserRole.BUYER.value)),
            )
            users_map[user.username] = user

        return users_map

    def load_sellers(self, data_dir: Path, users: dict[str, User]) -> dict[str, Seller]:
        """Load seller profiles from sellers.json, keyed by owner username."""
        sellers_map: dict[str, Seller] = {}
        for seller_data in self._read(data_dir, "sellers.json"):
            owner = self._lookup(users, seller_data["username"], "load sellers data", "user")
            seller = self.seller_service.create_seller(
                user_id=owner.id,
                shop_name=seller_data["shop_name"],
                description=seller_data.get("description"),
                address=seller_data["address"],
                phone=seller_data["phone"],
                whatsapp=seller_data.get("whatsapp"),
                location=seller_data.get("location"),
            )
            if seller_data.get("verified"):
                self.seller_service.verify_seller(seller.id)
            sellers_map[owner.username] = seller

        return sellers_map

    def load_parts(self, data_dir: Path, sellers: dict[str, Seller]) -> int:
        """Load part listings from parts.json."""
        count = 0
        for part_data in self._read(data_dir, "parts.json"):
            seller = self._lookup(sellers, part_data["seller"], "load parts data", "seller")
            try:
                availability = Availability(part_data.get("availability", Availability.IN_STOCK.value))
            except ValueError as e:
                raise InvalidOperationException(
                    "load parts data",
                    f"invalid availability '{part_data.get('availability')}' for part {part_data['name']}",
                ) from e

            self.part_service.create_part(
                seller_id=seller.id,
                name=part_data["name"],
                description=part_data.get("description"),
                price=Decimal(part_data["price"]),
                vehicle_make=part_data["vehicle_make"],
                vehicle_model=part_data["vehicle_model"],
                vehicle_year=part_data["vehicle_year"],
                availability=availability,
                image_url=part_data.get("image_url"),
            )
            count += 1

        return count

    def load_reviews(self, data_dir: Path, users: dict[str, User], sellers: dict[str, Seller]) -> int:
        """Load reviews from reviews.json; seller ratings follow from these."""
        count = 0
        for review_data in self._read(data_dir, "reviews.json"):
            user = self._lookup(users, review_data["username"], "load reviews data", "user")
            seller = self._lookup(sellers, review_data["seller"], "load reviews data", "seller")
            self.review_service.create_review(
                user_id=user.id,
                seller_id=seller.id,
                rating=Decimal(review_data["rating"]),
                comment=review_data.get("comment"),
            )
            count += 1

        return count

    def load_searches(self, data_dir: Path, users: dict[str, User]) -> int:
        """Load logged searches from searches.json."""
        count = 0
        for search_data in self._read(data_dir, "searches.json"):
            user = self._lookup(users, search_data["username"], "load searches data", "user")
            self.search_service.log_search(
                user_id=user.id,
                vehicle_make=search_data.get("vehicle_make"),
                vehicle_model=search_data.get("vehicle_model"),
                vehicle_year=search_data.get("vehicle_year"),
                part_name=search_data.get("part_name"),
            )
            count += 1

        return count

    def load_contacts(self, data_dir: Path, users: dict[str, User], sellers: dict[str, Seller]) -> int:
        """Load contact events from contacts.json."""
        count = 0
        for contact_data in self._read(data_dir, "contacts.json"):
            user = self._lookup(users, contact_data["username"], "load contacts data", "user")
            seller = self._lookup(sellers, contact_data["seller"], "load contacts data", "seller")
            try:
                contact_type = ContactType(contact_data["type"])
            except ValueError as e:
                raise InvalidOperationException(
                    "load contacts data", f"invalid contact type '{contact_data['type']}'"
                ) from e

            self.contact_service.create_contact(user.id, seller.id, contact_type)
            count += 1

        return count

    def _read(self, data_dir: Path, filename: str) -> list[dict[str, Any]]:
        data_file = data_dir / filename
        try:
            with data_file.open() as f:
                return json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            raise InvalidOperationException(
                f"load {data_file.stem} data", f"failed to read {data_file}: {e}"
            ) from e

    @staticmethod
    def _lookup(records: dict[str, Any], key: str, operation: str, kind: str) -> Any:
        record = records.get(key)
        if record is None:
            raise InvalidOperationException(operation, f"unknown {kind} '{key}'")
        return record
