import uuid


def register(client, email=None, password="testing12345", full_name="Bob Smith"):
    email = email or f"user_{uuid.uuid4().hex[:8]}@example.com"
    response = client.post(
        "/auth/register",
        json={"email": email, "password": password, "fullName": full_name},
    )
    return email, response


def test_register_and_login_scenario(client):
    register_response = client.post(
        "/auth/register",
        json={"email": "a@x.com", "password": "p1", "fullName": "A"},
    )
    assert register_response.status_code == 200
    assert register_response.json() == {"id": 1, "email": "a@x.com", "fullName": "A"}

    login = client.post("/auth/login", json={"email": "a@x.com", "password": "p1"})
    assert login.status_code == 200
    body = login.json()
    assert set(body) == {"accessToken", "refreshToken"}
    assert body["accessToken"] and body["refreshToken"]
    assert body["accessToken"] != body["refreshToken"]

    bad_login = client.post("/auth/login", json={"email": "a@x.com", "password": "wrong"})
    assert bad_login.status_code == 401


def test_login_failures_share_message(client):
    email, _ = register(client)

    wrong_password = client.post("/auth/login", json={"email": email, "password": "nope"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@example.com", "password": "nope"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid email or password"}


def test_register_duplicate_email(client):
    email, first = register(client, full_name="Original")
    assert first.status_code == 200

    _, duplicate = register(client, email=email, password="other-password", full_name="Impostor")
    assert duplicate.status_code == 400
    assert duplicate.json() == {"detail": "User already exists"}

    me = client.get(f"/auth/me/{first.json()['id']}")
    assert me.json()["fullName"] == "Original"
    # the original password still works
    login = client.post("/auth/login", json={"email": email, "password": "testing12345"})
    assert login.status_code == 200


def test_register_missing_fields(client):
    response = client.post("/auth/register", json={"email": "user1@example.com"})
    assert response.status_code == 422


def test_me_returns_public_fields_only(client):
    email, reg = register(client, full_name="Alice Wonder")
    user_id = reg.json()["id"]
    client.post("/auth/login", json={"email": email, "password": "testing12345"})

    me = client.get(f"/auth/me/{user_id}")
    assert me.status_code == 200
    assert me.json() == {"id": user_id, "email": email, "fullName": "Alice Wonder"}


def test_me_unknown_user(client):
    response = client.get("/auth/me/999")
    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_me_rejects_non_numeric_id(client):
    response = client.get("/auth/me/abc")
    assert response.status_code == 400
    assert response.json() == {"detail": "Validation failed (numeric string is expected)"}


def test_validate_then_refresh_flow(client):
    email, reg = register(client)
    user_id = reg.json()["id"]
    tokens = client.post("/auth/login", json={"email": email, "password": "testing12345"}).json()

    valid = client.post(
        "/auth/validate-refresh-token",
        json={"userId": user_id, "refreshToken": tokens["refreshToken"]},
    )
    assert valid.status_code == 200
    assert valid.json() == {"userId": user_id}

    refreshed = client.post(f"/auth/refresh/{user_id}")
    assert refreshed.status_code == 200
    new_tokens = refreshed.json()
    assert new_tokens["refreshToken"] != tokens["refreshToken"]

    # rotation: only the newest refresh token is accepted
    old = client.post(
        "/auth/validate-refresh-token",
        json={"userId": user_id, "refreshToken": tokens["refreshToken"]},
    )
    assert old.status_code == 401
    new = client.post(
        "/auth/validate-refresh-token",
        json={"userId": user_id, "refreshToken": new_tokens["refreshToken"]},
    )
    assert new.status_code == 200


def test_validate_refresh_token_wrong_string(client):
    email, reg = register(client)
    user_id = reg.json()["id"]
    client.post("/auth/login", json={"email": email, "password": "testing12345"})

    response = client.post(
        "/auth/validate-refresh-token",
        json={"userId": user_id, "refreshToken": "not-the-token"},
    )
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid refresh token"}


def test_validate_refresh_token_never_logged_in(client):
    _, reg = register(client)
    response = client.post(
        "/auth/validate-refresh-token",
        json={"userId": reg.json()["id"], "refreshToken": "anything"},
    )
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid refresh token"}


def test_validate_refresh_token_requires_numeric_user_id(client):
    response = client.post(
        "/auth/validate-refresh-token",
        json={"userId": "abc", "refreshToken": "anything"},
    )
    assert response.status_code == 422


def test_refresh_unknown_user(client):
    response = client.post("/auth/refresh/404")
    assert response.status_code == 404


def test_out_of_range_ids_are_rejected(client):
    too_big = "99999999999999999999"

    me = client.get(f"/auth/me/{too_big}")
    assert me.status_code == 400
    assert me.json() == {"detail": "Validation failed (numeric string is expected)"}

    refresh = client.post(f"/auth/refresh/{too_big}")
    assert refresh.status_code == 400

    validate = client.post(
        "/auth/validate-refresh-token",
        json={"userId": 2 ** 70, "refreshToken": "anything"},
    )
    assert validate.status_code == 422


def test_largest_id_reaches_the_store(client):
    response = client.get(f"/auth/me/{2 ** 63 - 1}")
    assert response.status_code == 404
