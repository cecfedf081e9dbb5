"""Test seller API endpoints."""

from decimal import Decimal

from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.orm import Session

from app.models.contact import ContactType
from app.models.user import UserRole
from app.services.container import ServiceContainer


class TestSellerAPI:
    """Test cases for Seller API endpoints."""

    def test_list_sellers_empty(self, app: Flask, client: FlaskClient, session: Session):
        response = client.get("/api/sellers")

        assert response.status_code == 200
        assert response.get_json() == []

    def test_list_sellers(self, app: Flask, client: FlaskClient, session: Session, make_seller):
        """Test GET /api/sellers returns sellers in registration order."""
        make_seller("AutoParts Pro")
        make_seller("QuickParts Express")
        session.commit()

        response = client.get("/api/sellers")

        assert response.status_code == 200
        data = response.get_json()
        assert [s["shop_name"] for s in data] == ["AutoParts Pro", "QuickParts Express"]
        for seller in data:
            assert seller["verified"] is False
            assert seller["rating"] == "0.00"
            assert seller["review_count"] == 0

    def test_create_seller(self, app: Flask, client: FlaskClient, session: Session, make_user):
        user_id = make_user("kofi", role=UserRole.SELLER).id
        session.commit()

        response = client.post("/api/sellers", json={
            "user_id": user_id,
            "shop_name": "Kofi Spares",
            "address": "Shop 12, Abossey Okai Market",
            "phone": "+233201111111",
            "whatsapp": "+233201111111",
            "location": {"lat": 5.5777, "lng": -0.2309},
        })

        assert response.status_code == 201
        data = response.get_json()
        assert data["user_id"] == user_id
        assert data["shop_name"] == "Kofi Spares"
        assert data["location"] == {"lat": 5.5777, "lng": -0.2309}
        assert data["verified"] is False
        assert data["rating"] == "0.00"
        assert data["review_count"] == 0

    def test_create_seller_ignores_verified_flag(self, app: Flask, client: FlaskClient, session: Session, make_user):
        user_id = make_user().id
        session.commit()

        response = client.post("/api/sellers", json={
            "user_id": user_id,
            "shop_name": "Sneaky Shop",
            "address": "Somewhere",
            "phone": "0200000000",
            "verified": True,
            "rating": 5,
        })

        assert response.status_code == 201
        assert response.get_json()["verified"] is False
        assert response.get_json()["rating"] == "0.00"

    def test_create_seller_unknown_user(self, app: Flask, client: FlaskClient, session: Session):
        response = client.post("/api/sellers", json={
            "user_id": 999,
            "shop_name": "Ghost Shop",
            "address": "Nowhere",
            "phone": "0",
        })

        assert response.status_code == 404

    def test_create_second_seller_for_user(self, app: Flask, client: FlaskClient, session: Session, make_seller):
        user_id = make_seller().user_id
        session.commit()

        response = client.post("/api/sellers", json={
            "user_id": user_id,
            "shop_name": "Second Shop",
            "address": "Elsewhere",
            "phone": "0",
        })

        assert response.status_code == 409

    def test_create_seller_missing_fields(self, app: Flask, client: FlaskClient, session: Session):
        response = client.post("/api/sellers", json={"shop_name": "No Owner"})

        assert response.status_code == 400

    def test_get_seller_with_parts_and_owner(
        self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part
    ):
        seller = make_seller("AutoParts Pro")
        make_part(seller, "Brake Pads")
        make_part(seller, "Air Filter")
        seller_id = seller.id
        session.commit()

        response = client.get(f"/api/sellers/{seller_id}")

        assert response.status_code == 200
        data = response.get_json()
        assert data["shop_name"] == "AutoParts Pro"
        assert [p["name"] for p in data["parts"]] == ["Brake Pads", "Air Filter"]
        assert data["user"]["username"].startswith("dealer")
        assert "password" not in data["user"]

    def test_get_seller_not_found(self, app: Flask, client: FlaskClient, session: Session):
        response = client.get("/api/sellers/999")

        assert response.status_code == 404
        assert response.get_json()["error"] == "Seller 999 was not found"

    def test_get_seller_by_user(self, app: Flask, client: FlaskClient, session: Session, make_seller):
        seller = make_seller("Engine Experts")
        seller_id, user_id = seller.id, seller.user_id
        session.commit()

        response = client.get(f"/api/sellers/by-user/{user_id}")

        assert response.status_code == 200
        assert response.get_json()["id"] == seller_id
        assert response.get_json()["parts"] == []

    def test_get_seller_by_user_without_shop(self, app: Flask, client: FlaskClient, session: Session, make_user):
        user_id = make_user().id
        session.commit()

        response = client.get(f"/api/sellers/by-user/{user_id}")

        assert response.status_code == 404

    def test_update_seller(self, app: Flask, client: FlaskClient, session: Session, make_seller):
        seller_id = make_seller("Old Name").id
        session.commit()

        response = client.put(f"/api/sellers/{seller_id}", json={
            "shop_name": "New Name",
            "description": "Now selling tyres",
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data["shop_name"] == "New Name"
        assert data["description"] == "Now selling tyres"
        assert data["address"] == "Shop 45, Abossey Okai Market"

    def test_update_seller_cannot_verify(self, app: Flask, client: FlaskClient, session: Session, make_seller):
        """Test that verification is not writable through a profile update."""
        seller_id = make_seller().id
        session.commit()

        response = client.put(f"/api/sellers/{seller_id}", json={"verified": True, "rating": "5.00"})

        assert response.status_code == 200
        assert response.get_json()["verified"] is False
        assert response.get_json()["rating"] == "0.00"

    def test_update_seller_not_found(self, app: Flask, client: FlaskClient, session: Session):
        response = client.put("/api/sellers/999", json={"shop_name": "Nope"})

        assert response.status_code == 404

    def test_pending_and_verify(self, app: Flask, client: FlaskClient, session: Session, make_seller):
        first_id = make_seller("First").id
        second_id = make_seller("Second").id
        session.commit()

        response = client.get("/api/sellers/pending/verification")
        assert [s["id"] for s in response.get_json()] == [first_id, second_id]

        response = client.post(f"/api/sellers/{first_id}/verify")
        assert response.status_code == 200
        assert response.get_json()["verified"] is True

        response = client.get("/api/sellers/pending/verification")
        assert [s["id"] for s in response.get_json()] == [second_id]

    def test_verify_seller_not_found(self, app: Flask, client: FlaskClient, session: Session):
        response = client.post("/api/sellers/999/verify")

        assert response.status_code == 404

    def test_list_seller_contacts(
        self, app: Flask, client: FlaskClient, session: Session, container: ServiceContainer,
        make_seller, make_user
    ):
        seller_id = make_seller().id
        buyer_id = make_user().id
        contacts = container.contact_service()
        contacts.create_contact(buyer_id, seller_id, ContactType.WHATSAPP)
        contacts.create_contact(buyer_id, seller_id, ContactType.PROFILE_VIEW)
        session.commit()

        response = client.get(f"/api/sellers/{seller_id}/contacts")

        assert response.status_code == 200
        assert [c["type"] for c in response.get_json()] == ["profile_view", "whatsapp"]

    def test_list_contacts_unknown_seller(self, app: Flask, client: FlaskClient, session: Session):
        response = client.get("/api/sellers/999/contacts")

        assert response.status_code == 404

    def test_rating_serialized_with_two_decimals(
        self, app: Flask, client: FlaskClient, session: Session, container: ServiceContainer,
        make_seller, make_user
    ):
        seller_id = make_seller().id
        buyer_id = make_user().id
        container.review_service().create_review(buyer_id, seller_id, Decimal("4.5"))
        session.commit()

        response = client.get(f"/api/sellers/{seller_id}")

        assert response.get_json()["rating"] == "4.50"
        assert response.get_json()["review_count"] == 1
