"""
Test API endpoints.
"""
from fastapi.testclient import TestClient

from app.core.security import create_access_token

DAY = "2099-06-01"


def create_venue(client: TestClient, headers: dict, **overrides) -> dict:
    payload = {
        "name": "Conference Hall A",
        "description": "Modern conference facility",
        "location": "Business District",
        "capacity": 100,
        "price_per_day": 1200,
        "amenities": ["Projector", "WiFi"],
        "images": [],
    }
    payload.update(overrides)
    response = client.post("/api/venues", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def booking_payload(venue_id: int, **overrides) -> dict:
    payload = {
        "venue_id": venue_id,
        "booking_date": DAY,
        "customer_name": "Jane Doe",
        "customer_email": "Jane@Example.com",
        "customer_phone": "555-0100",
        "event_type": "Conference",
        "guest_count": 40,
    }
    payload.update(overrides)
    return payload


class TestHealthAndAuth:

    def test_health(self, client: TestClient):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert "running" in response.json()["message"]

    def test_register_and_login(self, client: TestClient):
        response = client.post(
            "/api/auth/admin/register",
            json={"name": "Owner", "email": "owner@example.com", "password": "hunter22"},
        )
        assert response.status_code == 201

        again = client.post(
            "/api/auth/admin/register",
            json={"name": "Owner", "email": "owner@example.com", "password": "hunter22"},
        )
        assert again.status_code == 400

        bad = client.post(
            "/api/auth/admin/login",
            json={"email": "owner@example.com", "password": "wrong-pass"},
        )
        assert bad.status_code == 401

        login = client.post(
            "/api/auth/admin/login",
            json={"email": "owner@example.com", "password": "hunter22"},
        )
        assert login.status_code == 200
        token = login.json()["access_token"]

        me = client.get("/api/admin-panel/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "owner@example.com"

    def test_admin_routes_need_token(self, client: TestClient):
        response = client.post("/api/venues", json={})
        assert response.status_code in (401, 403)

        response = client.get("/api/bookings")
        assert response.status_code in (401, 403)

    def test_garbage_token(self, client: TestClient):
        response = client.get(
            "/api/admin-panel/stats", headers={"Authorization": "Bearer not-a-token"}
        )
        assert response.status_code == 401

    def test_non_admin_role_rejected(self, client: TestClient, admin):
        token = create_access_token(admin.email, "user")
        response = client.get(
            "/api/admin-panel/stats", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 403


class TestVenueEndpoints:

    def test_crud_and_soft_delete(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        assert venue["owner"] == "admin@example.com"
        assert venue["is_active"] is True

        response = client.put(
            f"/api/venues/{venue['id']}", json={"capacity": 120}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["capacity"] == 120
        assert response.json()["name"] == "Conference Hall A"

        response = client.delete(f"/api/venues/{venue['id']}", headers=admin_headers)
        assert response.status_code == 200

        assert client.get("/api/venues").json() == []
        direct = client.get(f"/api/venues/{venue['id']}")
        assert direct.status_code == 200
        assert direct.json()["is_active"] is False

    def test_invalid_venue_payload(self, client: TestClient, admin_headers):
        response = client.post(
            "/api/venues",
            json={"name": "X", "description": "d", "location": "l", "capacity": 0, "price_per_day": 1},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_unknown_venue(self, client: TestClient, admin_headers):
        assert client.get("/api/venues/999").status_code == 404
        response = client.put("/api/venues/999", json={"name": "New"}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Venue not found"

    def test_list_filtered_by_date(self, client: TestClient, admin_headers):
        booked = create_venue(client, admin_headers, name="Booked")
        blocked = create_venue(client, admin_headers, name="Blocked")
        free = create_venue(client, admin_headers, name="Free")

        assert client.post("/api/bookings", json=booking_payload(booked["id"])).status_code == 201
        response = client.post(
            f"/api/venues/{blocked['id']}/block-dates",
            json={"dates": [DAY], "reason": "Maintenance"},
            headers=admin_headers,
        )
        assert response.status_code == 200

        listed = client.get("/api/venues", params={"date": DAY}).json()
        assert [v["id"] for v in listed] == [free["id"]]

        everything = client.get("/api/venues").json()
        assert [v["id"] for v in everything] == [free["id"], blocked["id"], booked["id"]]

        assert client.get("/api/venues", params={"date": "tomorrow"}).status_code == 400

    def test_block_unblock_and_availability(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        vid = venue["id"]

        response = client.post(
            f"/api/venues/{vid}/block-dates", json={"dates": ["2099-07-04"]}, headers=admin_headers
        )
        body = response.json()
        assert body["message"] == "Dates blocked successfully"
        assert body["venue"]["unavailable_dates"] == [
            {"date": "2099-07-04", "reason": "Blocked by admin"}
        ]

        check = client.get(f"/api/venues/{vid}/available", params={"date": "2099-07-04"})
        assert check.json()["available"] is False

        response = client.request(
            "DELETE",
            f"/api/venues/{vid}/unblock-dates",
            json={"dates": ["2099-07-04"]},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["venue"]["unavailable_dates"] == []

        check = client.get(f"/api/venues/{vid}/available", params={"date": "2099-07-04"})
        assert check.json()["available"] is True

    def test_block_requires_dates(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        response = client.post(
            f"/api/venues/{venue['id']}/block-dates", json={"dates": []}, headers=admin_headers
        )
        assert response.status_code == 422

    def test_range_availability(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        vid = venue["id"]
        client.post("/api/bookings", json=booking_payload(vid, booking_date="2099-06-03"))
        client.post(
            f"/api/venues/{vid}/block-dates",
            json={"dates": ["2099-06-02", "2099-06-03"]},
            headers=admin_headers,
        )

        response = client.get(
            f"/api/venues/{vid}/availability",
            params={"start_date": "2099-06-01", "end_date": "2099-06-05"},
        )
        assert response.status_code == 200
        assert response.json() == {
            "venue": "Conference Hall A",
            "booked_dates": ["2099-06-03"],
            "blocked_dates": ["2099-06-02", "2099-06-03"],
            "all_unavailable": ["2099-06-03", "2099-06-02", "2099-06-03"],
        }

        reversed_range = client.get(
            f"/api/venues/{vid}/availability",
            params={"start_date": "2099-06-05", "end_date": "2099-06-01"},
        )
        assert reversed_range.status_code == 400


class TestBookingEndpoints:

    def test_booking_flow(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers, capacity=100, price_per_day=1200)
        vid = venue["id"]

        too_many = client.post("/api/bookings", json=booking_payload(vid, guest_count=150))
        assert too_many.status_code == 400
        assert too_many.json()["detail"] == "Guest count exceeds venue capacity"

        created = client.post("/api/bookings", json=booking_payload(vid))
        assert created.status_code == 201
        booking = created.json()
        assert booking["total_amount"] == 1200
        assert booking["status"] == "confirmed"
        assert booking["customer_email"] == "jane@example.com"
        assert booking["venue"] == {"id": vid, "name": "Conference Hall A", "location": "Business District"}

        conflict = client.post("/api/bookings", json=booking_payload(vid, guest_count=10))
        assert conflict.status_code == 409

        fetched = client.get(f"/api/bookings/{booking['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["id"] == booking["id"]

    def test_blocked_day_is_conflict(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        client.post(
            f"/api/venues/{venue['id']}/block-dates", json={"dates": [DAY]}, headers=admin_headers
        )
        response = client.post("/api/bookings", json=booking_payload(venue["id"]))
        assert response.status_code == 409
        assert response.json()["detail"] == "Venue is not available for this date"

    def test_validation_errors(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        vid = venue["id"]

        assert client.post("/api/bookings", json=booking_payload(vid, customer_email="nope")).status_code == 422
        assert client.post("/api/bookings", json=booking_payload(vid, guest_count=0)).status_code == 422
        assert client.post("/api/bookings", json=booking_payload(vid, booking_date="later")).status_code == 422
        assert client.post("/api/bookings", json=booking_payload(vid, customer_phone="  ")).status_code == 400
        assert client.post("/api/bookings", json=booking_payload(vid, booking_date="2001-01-01")).status_code == 400
        assert client.post("/api/bookings", json=booking_payload(9999)).status_code == 404

    def test_admin_status_override_and_listing(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        booking = client.post("/api/bookings", json=booking_payload(venue["id"])).json()

        response = client.put(
            f"/api/bookings/{booking['id']}", json={"status": "pending"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "pending"

        bad = client.put(
            f"/api/bookings/{booking['id']}", json={"status": "archived"}, headers=admin_headers
        )
        assert bad.status_code == 422

        missing = client.put("/api/bookings/999", json={"status": "confirmed"}, headers=admin_headers)
        assert missing.status_code == 404

        listed = client.get("/api/bookings", params={"status": "pending"}, headers=admin_headers)
        assert [b["id"] for b in listed.json()] == [booking["id"]]

    def test_cancel_by_customer_frees_day(self, client: TestClient, admin_headers):
        venue = create_venue(client, admin_headers)
        vid = venue["id"]
        booking = client.post("/api/bookings", json=booking_payload(vid)).json()

        stranger = client.delete(f"/api/bookings/{booking['id']}", params={"email": "bob@example.com"})
        assert stranger.status_code == 403

        response = client.delete(f"/api/bookings/{booking['id']}", params={"email": "JANE@example.com"})
        assert response.status_code == 200
        assert response.json()["message"] == "Booking cancelled successfully"
        assert response.json()["booking"]["status"] == "cancelled"

        again = client.delete(f"/api/bookings/{booking['id']}", headers=admin_headers)
        assert again.status_code == 200

        available = client.get(f"/api/venues/{vid}/available", params={"date": DAY})
        assert available.json()["available"] is True

        assert client.delete("/api/bookings/999", headers=admin_headers).status_code == 404


class TestAdminPanel:

    def test_stats(self, client: TestClient, admin_headers):
        hall = create_venue(client, admin_headers, price_per_day=1000)
        garden = create_venue(client, admin_headers, name="Garden", price_per_day=500)
        create_venue(client, admin_headers, name="Closed")
        closed_id = client.get("/api/venues").json()[0]["id"]
        client.delete(f"/api/venues/{closed_id}", headers=admin_headers)

        client.post("/api/bookings", json=booking_payload(hall["id"]))
        cancelled = client.post("/api/bookings", json=booking_payload(garden["id"])).json()
        client.delete(f"/api/bookings/{cancelled['id']}", headers=admin_headers)

        stats = client.get("/api/admin-panel/stats", headers=admin_headers).json()

        assert stats["total_venues"] == 2
        assert stats["total_bookings"] == 2
        assert stats["total_revenue"] == 1000
        assert stats["upcoming_bookings"] == 1
        assert stats["bookings_by_status"] == {"pending": 0, "confirmed": 1, "cancelled": 1}

        blockable = client.get("/api/admin-panel/venues", headers=admin_headers).json()
        assert {v["id"] for v in blockable} == {hall["id"], garden["id"]}
