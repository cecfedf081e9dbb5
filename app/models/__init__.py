"""SQLAlchemy models for the parts marketplace."""

# Import all models here for Alembic auto-generation
from app.models.contact import Contact, ContactType
from app.models.part import Availability, Part
from app.models.review import Review
from app.models.search import Search
from app.models.seller import Seller
from app.models.user import User, UserRole

__all__: list[str] = [
    "Availability",
    "Contact",
    "ContactType",
    "Part",
    "Review",
    "Search",
    "Seller",
    "User",
    "UserRole",
]
