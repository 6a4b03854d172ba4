def _create_booking(client, auth_headers, field_id, start="10:00", end="11:00"):
    response = client.post(
        "/bookings",
        json={
            "field_id": field_id,
            "booking_date": "2025-06-02",
            "start_time": start,
            "end_time": end,
        },
        headers=auth_headers(user_id=5),
    )
    assert response.status_code == 201
    return response.json()["booking"]["booking_id"]


def test_pay_pending_booking(client, auth_headers, make_field):
    field = make_field(name="Court 3", price_per_hour=120)
    booking_id = _create_booking(client, auth_headers, field.id)

    response = client.post("/payments", json={"booking_id": booking_id}, headers=auth_headers())

    assert response.status_code == 200
    assert response.json() == {
        "message": "Payment completed successfully",
        "payment": {
            "booking_id": booking_id,
            "user_id": 5,
            "field_id": field.id,
            "field_name": "Court 3",
            "booking_date": "2025-06-02",
            "start_time": "10:00",
            "end_time": "11:00",
            "total_price": 120,
            "status": "paid",
        },
    }


def test_paying_twice_is_rejected(client, auth_headers, make_field):
    booking_id = _create_booking(client, auth_headers, make_field().id)
    client.post("/payments", json={"booking_id": booking_id}, headers=auth_headers())

    response = client.post("/payments", json={"booking_id": booking_id}, headers=auth_headers())

    assert response.status_code == 400
    assert response.json() == {
        "error": "Cannot update payment for booking with status: paid. "
        "Only 'confirmed' or 'pending' bookings can be paid."
    }


def test_paid_booking_keeps_blocking_its_slot(client, auth_headers, make_field):
    field = make_field()
    booking_id = _create_booking(client, auth_headers, field.id)
    client.post("/payments", json={"booking_id": booking_id}, headers=auth_headers())

    response = client.post(
        "/bookings",
        json={
            "field_id": field.id,
            "booking_date": "2025-06-02",
            "start_time": "10:30",
            "end_time": "11:30",
        },
        headers=auth_headers(),
    )

    assert response.status_code == 409


def test_invalid_booking_id(client, auth_headers):
    response = client.post("/payments", json={"booking_id": 0}, headers=auth_headers())

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid booking ID"}


def test_unknown_booking(client, auth_headers):
    response = client.post("/payments", json={"booking_id": 999}, headers=auth_headers())

    assert response.status_code == 404
    assert response.json() == {"error": "Booking not found"}


def test_payment_requires_token(client):
    response = client.post("/payments", json={"booking_id": 1})

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
