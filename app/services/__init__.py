"""Services package for the Parts Marketplace."""

from app.services.container import ServiceContainer
from app.services.part_service import PartService
from app.services.search_service import SearchService
from app.services.seller_service import SellerService
from app.services.test_data_service import TestDataService
from app.services.user_service import UserService

__all__ = [
    "ServiceContainer",
    "PartService",
    "SearchService",
    "SellerService",
    "TestDataService",
    "UserService",
]
