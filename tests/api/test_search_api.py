"""Test search API endpoints."""

from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.orm import Session


def _seed(session: Session, make_seller, make_part) -> dict[str, int]:
    pro = make_seller("AutoParts Pro")
    quick = make_seller("QuickParts Express")
    make_part(pro, "Brake Pads Set - Front", vehicle_make="Honda", vehicle_model="City", vehicle_year="2020")
    make_part(pro, "Air Filter", vehicle_make="Toyota", vehicle_model="Corolla", vehicle_year="2018")
    make_part(quick, "Brake Disc", vehicle_make="Honda", vehicle_model="City", vehicle_year="2019-2023")
    ids = {"pro": pro.id, "quick": quick.id}
    session.commit()
    return ids


class TestSearchAPI:
    """Test cases for POST /api/search and GET /api/searches/<user_id>."""

    def test_search_grouped_by_seller(
        self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part
    ):
        ids = _seed(session, make_seller, make_part)

        response = client.post("/api/search", json={"vehicle_make": "honda", "vehicle_year": "2023"})

        assert response.status_code == 200
        data = response.get_json()
        assert len(data) == 1
        assert data[0]["seller"]["id"] == ids["quick"]
        assert data[0]["seller"]["user"]["username"].startswith("dealer")
        assert [p["name"] for p in data[0]["matching_parts"]] == ["Brake Disc"]

    def test_search_year_inside_range_is_not_matched(
        self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part
    ):
        _seed(session, make_seller, make_part)

        response = client.post("/api/search", json={"vehicle_make": "honda", "vehicle_year": "2021"})

        assert response.status_code == 200
        assert response.get_json() == []

    def test_search_rejects_non_json_body(self, app: Flask, client: FlaskClient, session: Session):
        response = client.post("/api/search", data="brake pads", content_type="text/plain")

        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid JSON"

    def test_search_returns_full_catalogue(
        self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part
    ):
        ids = _seed(session, make_seller, make_part)

        response = client.post("/api/search", json={"part_name": "BRAKE"})

        data = response.get_json()
        assert [r["seller"]["id"] for r in data] == [ids["pro"], ids["quick"]]
        assert len(data[0]["matching_parts"]) == 1
        assert len(data[0]["seller"]["parts"]) == 2

    def test_search_without_filters(
        self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part
    ):
        _seed(session, make_seller, make_part)

        response = client.post("/api/search", json={})

        assert response.status_code == 200
        assert sum(len(r["matching_parts"]) for r in response.get_json()) == 3

    def test_search_no_results(self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part):
        _seed(session, make_seller, make_part)

        response = client.post("/api/search", json={"vehicle_make": "Tesla"})

        assert response.status_code == 200
        assert response.get_json() == []

    def test_signed_in_search_is_logged(
        self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part, make_user
    ):
        _seed(session, make_seller, make_part)
        user_id = make_user().id
        session.commit()

        client.post("/api/search", json={"user_id": user_id, "vehicle_make": "Honda", "part_name": " "})
        client.post("/api/search", json={"user_id": user_id, "part_name": "filter"})

        response = client.get(f"/api/searches/{user_id}")

        assert response.status_code == 200
        data = response.get_json()
        assert [s["part_name"] for s in data] == ["filter", None]
        assert data[1]["vehicle_make"] == "Honda"
        assert all(s["user_id"] == user_id for s in data)

    def test_anonymous_search_is_not_logged(
        self, app: Flask, client: FlaskClient, session: Session, make_seller, make_part
    ):
        _seed(session, make_seller, make_part)

        client.post("/api/search", json={"part_name": "brake"})

        assert client.get("/api/analytics").get_json()["total_searches"] == 0

    def test_search_unknown_user(self, app: Flask, client: FlaskClient, session: Session):
        response = client.post("/api/search", json={"user_id": 999, "part_name": "brake"})

        assert response.status_code == 404

    def test_list_searches_unknown_user(self, app: Flask, client: FlaskClient, session: Session):
        response = client.get("/api/searches/999")

        assert response.status_code == 404
