import logging
from unittest.mock import MagicMock

import pytest

from fieldbook.api.dependencies.services import get_booking_service
from fieldbook.core.exceptions import ServiceException

# The app fixture pins "now" to 2025-06-01 09:00.
TOMORROW = "2025-06-02"


def _booking(field_id, start="10:00", end="11:30", booking_date=TOMORROW):
    return {
        "field_id": field_id,
        "booking_date": booking_date,
        "start_time": start,
        "end_time": end,
    }


def test_create_booking(client, auth_headers, make_field):
    field = make_field(name="Lapangan A", price_per_hour=100, location="Jakarta")

    response = client.post("/bookings", json=_booking(field.id), headers=auth_headers())

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Booking created successfully"
    booking = body["booking"]
    assert booking["booking_id"] > 0
    assert booking == {
        "booking_id": booking["booking_id"],
        "field_id": field.id,
        "field_name": "Lapangan A",
        "location": "Jakarta",
        "booking_date": TOMORROW,
        "start_time": "10:00",
        "end_time": "11:30",
        "duration": "1.5 hours",
        "total_price": 150,
        "status": "pending",
    }


def test_admin_may_book(client, auth_headers, make_field):
    field = make_field()

    response = client.post("/bookings", json=_booking(field.id), headers=auth_headers("admin"))

    assert response.status_code == 201


def test_truncated_price(client, auth_headers, make_field):
    field = make_field(price_per_hour=100)

    response = client.post(
        "/bookings", json=_booking(field.id, start="10:00", end="12:20"), headers=auth_headers()
    )

    assert response.json()["booking"]["total_price"] == 233
    assert response.json()["booking"]["duration"] == "2.3 hours"


def test_overlap_conflict_and_back_to_back(client, auth_headers, make_field):
    field = make_field()
    first = client.post(
        "/bookings", json=_booking(field.id, "10:00", "12:00"), headers=auth_headers(user_id=1)
    )
    assert first.status_code == 201

    overlapping = client.post(
        "/bookings", json=_booking(field.id, "11:00", "13:00"), headers=auth_headers(user_id=2)
    )
    adjacent = client.post(
        "/bookings", json=_booking(field.id, "12:00", "13:00"), headers=auth_headers(user_id=2)
    )

    assert overlapping.status_code == 409
    assert overlapping.json() == {"error": "Field is already booked at the selected time"}
    assert adjacent.status_code == 201


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"field_id": 0}, "Invalid field ID"),
        ({"booking_date": "02/06/2025"}, "Invalid booking date format. Use YYYY-MM-DD"),
        ({"start_time": "10"}, "Invalid start time format. Use HH:MM"),
        ({"booking_date": "2025-6-2"}, "Invalid booking date format. Use YYYY-MM-DD"),
        ({"start_time": "10:5"}, "Invalid start time format. Use HH:MM"),
        ({"start_time": "9:00"}, "Invalid start time format. Use HH:MM"),
        ({"end_time": "noon"}, "Invalid end time format. Use HH:MM"),
        ({"end_time": "11:5"}, "Invalid end time format. Use HH:MM"),
        ({"start_time": "10:00", "end_time": "10:00"}, "End time must be after start time"),
        ({"booking_date": "2025-05-01"}, "Cannot book in the past"),
    ],
)
def test_validation_errors(client, auth_headers, overrides, message):
    payload = {**_booking(1), **overrides}

    response = client.post("/bookings", json=payload, headers=auth_headers())

    assert response.status_code == 400
    assert response.json() == {"error": message}


def test_unknown_field(client, auth_headers):
    response = client.post("/bookings", json=_booking(404), headers=auth_headers())

    assert response.status_code == 404
    assert response.json() == {"error": "Field not found"}


def test_missing_body_fields(client, auth_headers):
    response = client.post("/bookings", json={"field_id": 1}, headers=auth_headers())

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request body: ")


def test_booking_requires_token(client, make_field):
    field = make_field()

    response = client.post("/bookings", json=_booking(field.id))

    assert response.status_code == 401


def test_unknown_role_is_forbidden(client, token_for, make_field):
    field = make_field()
    headers = {"Authorization": f"Bearer {token_for(role='guest')}"}

    response = client.post("/bookings", json=_booking(field.id), headers=headers)

    assert response.status_code == 403
    assert response.json() == {"error": "access forbidden - user role required"}


def test_timing_header_is_set(client):
    response = client.get("/fields")

    assert response.headers["X-Process-Time"].endswith("ms")


def test_persistence_failure_is_logged_and_returns_500(app, client, auth_headers, caplog):
    failing = MagicMock()
    failing.create_booking.side_effect = ServiceException("Failed to create booking: disk full")
    app.dependency_overrides[get_booking_service] = lambda: failing

    with caplog.at_level(logging.ERROR, logger="fieldbook.errors"):
        response = client.post("/bookings", json=_booking(1), headers=auth_headers())

    app.dependency_overrides.pop(get_booking_service)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create booking: disk full"}
    assert "ServiceException: Failed to create booking: disk full" in caplog.text
