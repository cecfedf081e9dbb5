"""Part search and search log service."""

import logging
from dataclasses import dataclass, field

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from app.models.part import Part
from app.models.search import Search
from app.models.seller import Seller
from app.services.base import BaseService
from app.services.metrics_service import MetricsServiceProtocol
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


@dataclass
class SearchResult:
    """A seller together with the subset of its parts matching a search."""

    seller: Seller
    matching_parts: list[Part] = field(default_factory=list)


class SearchService(BaseService):
    """Service for matching parts against vehicle filters and logging searches."""

    def __init__(self, db, user_service: UserService, metrics_service: MetricsServiceProtocol):
        super().__init__(db)
        self.user_service = user_service
        self.metrics_service = metrics_service

    def search_parts(
        self,
        vehicle_make: str | None = None,
        vehicle_model: str | None = None,
        vehicle_year: str | None = None,
        part_name: str | None = None,
    ) -> list[SearchResult]:
        """Find parts matching every provided filter, grouped by seller.

        Make and model match case-insensitively and exactly. The year filter
        is a substring match on the stored text, so a listing for
        "2020-2023" is found by "2020" or "2023" but not by "2021". The part
        name filter is a case-insensitive substring match. Filters that are
        None or blank are ignored; parts with a null value in a filtered field never match.

        Returns:
            One SearchResult per seller, ordered by the seller's first
            matching part, each holding its matching parts in listing order.
        """
        vehicle_make, vehicle_model, vehicle_year, part_name = (
            _blank_to_none(value) for value in (vehicle_make, vehicle_model, vehicle_year, part_name)
        )

        stmt = select(Part).options(selectinload(Part.seller)).order_by(Part.id)

        if vehicle_make:
            stmt = stmt.where(func.lower(Part.vehicle_make) == vehicle_make.lower())
        if vehicle_model:
            stmt = stmt.where(func.lower(Part.vehicle_model) == vehicle_model.lower())
        if vehicle_year:
            stmt = stmt.where(Part.vehicle_year.contains(vehicle_year, autoescape=True))
        if part_name:
            stmt = stmt.where(
                func.lower(Part.name).contains(part_name.lower(), autoescape=True)
            )

        grouped: dict[int, SearchResult] = {}
        for part in self.db.scalars(stmt).all():
            result = grouped.get(part.seller_id)
            if result is None:
                result = grouped[part.seller_id] = SearchResult(seller=part.seller)
            result.matching_parts.append(part)

        results = list(grouped.values())
        self.metrics_service.record_search(len(results))
        logger.debug(
            "Search make=%r model=%r year=%r part=%r matched %d seller(s)",
            vehicle_make, vehicle_model, vehicle_year, part_name, len(results),
        )
        return results

    def log_search(
        self,
        user_id: int,
        vehicle_make: str | None = None,
        vehicle_model: str | None = None,
        vehicle_year: str | None = None,
        part_name: str | None = None,
        image_url: str | None = None,
    ) -> Search:
        """Record a search performed by a signed-in user.

        Raises:
            RecordNotFoundException: If the user does not exist
        """
        self.user_service.get_user(user_id)

        search = Search(
            user_id=user_id,
            vehicle_make=vehicle_make,
            vehicle_model=vehicle_model,
            vehicle_year=vehicle_year,
            part_name=part_name,
            image_url=image_url,
        )
        self.db.add(search)
        self.db.flush()
        return search

    def get_user_searches(self, user_id: int) -> list[Search]:
        """Get a user's logged searches, newest first.

        Raises:
            RecordNotFoundException: If the user does not exist
        """
        self.user_service.get_user(user_id)
        stmt = select(Search).where(Search.user_id == user_id).order_by(Search.id.desc())
        return list(self.db.scalars(stmt).all())
