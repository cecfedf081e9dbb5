from app.models.contact import Contact, ContactType
from app.services.base import BaseService
from app.services.metrics_service import MetricsServiceProtocol
from app.services.seller_service import SellerService
from app.services.user_service import UserService


class ContactService(BaseService):
    """Service recording buyer-to-seller contact events."""

    def __init__(
        self,
        db,
        user_service: UserService,
        seller_service: SellerService,
        metrics_service: MetricsServiceProtocol,
    ):
        super().__init__(db)
        self.user_service = user_service
        self.seller_service = seller_service
        self.metrics_service = metrics_service

    def create_contact(self, user_id: int, seller_id: int, contact_type: ContactType) -> Contact:
        """Log that a user contacted (or viewed) a seller.

        Raises:
            RecordNotFoundException: If the user or seller does not exist
        """
        self.user_service.get_user(user_id)
        self.seller_service.get_seller(seller_id)

        contact = Contact(user_id=user_id, seller_id=seller_id, type=contact_type)
        self.db.add(contact)
        self.db.flush()

        self.metrics_service.record_contact(contact_type.value)
        return contact

