def _register(client, path="/auth/register", **overrides):
    payload = {"username": "player", "email": "player@example.com", "password": "secret123"}
    payload.update(overrides)
    return client.post(path, json=payload)


def test_register_returns_email_and_token(client, token_service):
    response = _register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["email"] == "player@example.com"
    principal = token_service.decode_access_token(body["user"]["token"])
    assert principal.role == "user"


def test_admin_register_forces_admin_role(client, token_service):
    response = _register(client, path="/admin/auth/register", email="boss@example.com")

    assert response.status_code == 201
    principal = token_service.decode_access_token(response.json()["user"]["token"])
    assert principal.role == "admin"


def test_duplicate_email_is_conflict(client):
    assert _register(client).status_code == 201

    response = _register(client, username="someone")

    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}


def test_malformed_email_is_bad_request(client):
    response = _register(client, email="not-an-email")

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request body")


def test_short_password_is_bad_request(client):
    response = _register(client, password="123")

    assert response.status_code == 400
    assert response.json() == {"error": "Password must be at least 6 characters"}


def test_login_with_get_and_json_body(client):
    _register(client)

    response = client.request(
        "GET",
        "/auth/login",
        json={"email": "player@example.com", "password": "secret123"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"]["email"] == "player@example.com"
    assert body["user"]["token"]


def test_login_with_post(client):
    _register(client)

    response = client.post(
        "/auth/login", json={"email": "player@example.com", "password": "secret123"}
    )

    assert response.status_code == 200


def test_wrong_password_and_unknown_email_look_the_same(client):
    _register(client)

    wrong_password = client.post(
        "/auth/login", json={"email": "player@example.com", "password": "nope-nope"}
    )
    unknown_email = client.post(
        "/auth/login", json={"email": "ghost@example.com", "password": "secret123"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid email or password"}
