"""Test contact event logging."""

import pytest
from flask import Flask
from sqlalchemy.orm import Session

from app.exceptions import RecordNotFoundException
from app.models.contact import ContactType
from app.services.container import ServiceContainer


class TestContactService:
    """Test cases for ContactService functionality."""

    @pytest.mark.parametrize("contact_type", list(ContactType))
    def test_create_contact(
        self, app: Flask, session: Session, container: ServiceContainer, make_seller, make_user, contact_type
    ):
        seller = make_seller()
        buyer = make_user()

        contact = container.contact_service().create_contact(buyer.id, seller.id, contact_type)

        assert contact.id is not None
        assert contact.type == contact_type
        assert contact.user_id == buyer.id
        assert contact.seller_id == seller.id
        assert contact.created_at is not None

    def test_contacts_are_not_deduplicated(
        self, app: Flask, session: Session, container: ServiceContainer, make_seller, make_user
    ):
        """Test that every contact is its own event."""
        seller = make_seller()
        buyer = make_user()
        service = container.contact_service()

        service.create_contact(buyer.id, seller.id, ContactType.CALL)
        service.create_contact(buyer.id, seller.id, ContactType.CALL)

        assert len(container.seller_service().get_seller_contacts(seller.id)) == 2

    def test_unknown_user(self, app: Flask, session: Session, container: ServiceContainer, make_seller):
        seller = make_seller()

        with pytest.raises(RecordNotFoundException) as exc_info:
            container.contact_service().create_contact(999, seller.id, ContactType.WHATSAPP)

        assert "User 999 was not found" in str(exc_info.value)

    def test_unknown_seller(self, app: Flask, session: Session, container: ServiceContainer, make_user):
        buyer = make_user()

        with pytest.raises(RecordNotFoundException) as exc_info:
            container.contact_service().create_contact(buyer.id, 999, ContactType.WHATSAPP)

        assert "Seller 999 was not found" in str(exc_info.value)
