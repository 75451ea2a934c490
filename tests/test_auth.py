from conftest import auth_header, login, register


def test_register_returns_user_view(client):
    response = register(client, "alice", email="alice@example.com", phone="555-0100")
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == 200
    assert "timestamp" in body
    user = body["data"]
    assert user["username"] == "alice"
    assert user["email"] == "alice@example.com"
    assert user["phone"] == "555-0100"
    assert user["role"] == "USER"
    assert user["enabled"] is True
    assert user["createdAt"] is not None
    assert "password" not in user
    assert "hashedPassword" not in user


def test_register_duplicate_username(client):
    register(client, "alice")
    response = register(client, "alice")
    assert response.status_code == 400
    assert response.json()["message"] == "Username already exists"


def test_register_duplicate_email(client):
    register(client, "alice", email="shared@example.com")
    response = register(client, "alice2", email="shared@example.com")
    assert response.status_code == 400
    assert response.json()["message"] == "Email already exists"


def test_register_blank_email_counts_as_absent(client):
    assert register(client, "alice", email="").status_code == 200
    assert register(client, "alice2", email="").status_code == 200


def test_register_short_password(client):
    response = register(client, "alice", password="12345")
    assert response.status_code == 400
    assert response.json()["message"].startswith("password:")


def test_register_short_username(client):
    response = register(client, "al")
    assert response.status_code == 400
    assert response.json()["message"].startswith("username:")


def test_register_invalid_email(client):
    response = register(client, "alice", email="not-an-email")
    assert response.status_code == 400
    assert response.json()["message"].startswith("email:")


def test_register_missing_body_field(client):
    response = client.post("/api/auth/register", json={"username": "alice"})
    assert response.status_code == 400
    assert response.json()["code"] == 400


def test_login_returns_token_and_role(client):
    register(client, "alice")
    response = login(client, "alice")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["username"] == "alice"
    assert data["role"] == "USER"
    assert data["token"].count(".") == 2

    me = client.get("/api/users/me", headers=auth_header(data["token"]))
    assert me.status_code == 200
    assert me.json()["data"]["username"] == "alice"


def test_login_failures_share_one_message(client):
    register(client, "alice")
    wrong_password = login(client, "alice", "wrong-password")
    unknown_user = login(client, "nobody", "secret1")
    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.json()["message"] == unknown_user.json()["message"] == "Invalid username or password"


def test_login_disabled_account(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    client.put(f"/api/admin/users/{user_id}", json={"enabled": False}, headers=auth_header(admin_token))

    response = login(client, "alice")
    assert response.status_code == 400
    assert response.json()["message"] == "Account is disabled"


def test_disabled_account_with_wrong_password_gets_generic_message(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    client.put(f"/api/admin/users/{user_id}", json={"enabled": False}, headers=auth_header(admin_token))

    response = login(client, "alice", "wrong-password")
    assert response.json()["message"] == "Invalid username or password"
