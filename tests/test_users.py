from conftest import auth_header, login, register, token_for
from fusion_order.db.database import SessionLocal
from make_admin import make_user_admin


def test_me_returns_profile(client, user_token):
    response = client.get("/api/users/me", headers=auth_header(user_token))
    assert response.status_code == 200
    assert response.json()["data"]["username"] == "bob_user"


def test_change_password(client, user_token):
    response = client.put(
        "/api/users/me/password",
        json={"currentPassword": "secret1", "newPassword": "better-secret"},
        headers=auth_header(user_token),
    )
    assert response.status_code == 200
    assert login(client, "bob_user", "secret1").status_code == 400
    assert login(client, "bob_user", "better-secret").status_code == 200


def test_change_password_wrong_current(client, user_token):
    response = client.put(
        "/api/users/me/password",
        json={"currentPassword": "nope", "newPassword": "better-secret"},
        headers=auth_header(user_token),
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Current password is incorrect"


def test_change_password_requires_authentication(client):
    response = client.put(
        "/api/users/me/password",
        json={"currentPassword": "secret1", "newPassword": "better-secret"},
    )
    assert response.status_code == 401


def test_admin_gets_user(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    response = client.get(f"/api/admin/users/{user_id}", headers=auth_header(admin_token))
    assert response.status_code == 200
    assert response.json()["data"]["username"] == "alice"


def test_admin_get_missing_user(client, admin_token):
    response = client.get("/api/admin/users/999", headers=auth_header(admin_token))
    assert response.status_code == 404
    assert response.json()["message"] == "User not found, id: 999"


def test_patch_changes_only_given_field(client, admin_token):
    user = register(client, "alice", email="alice@example.com", phone="111").json()["data"]

    response = client.put(
        f"/api/admin/users/{user['id']}", json={"phone": "222"}, headers=auth_header(admin_token)
    )
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["phone"] == "222"
    assert updated["username"] == "alice"
    assert updated["email"] == "alice@example.com"
    assert updated["role"] == "USER"
    assert updated["enabled"] is True
    # Password untouched
    assert login(client, "alice").status_code == 200


def test_patch_with_empty_password_keeps_old_one(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    client.put(f"/api/admin/users/{user_id}", json={"password": ""}, headers=auth_header(admin_token))
    assert login(client, "alice").status_code == 200


def test_patch_password_is_rehashed(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    client.put(f"/api/admin/users/{user_id}", json={"password": "newpass1"}, headers=auth_header(admin_token))
    assert login(client, "alice", "newpass1").status_code == 200


def test_patch_rejects_taken_username(client, admin_token):
    register(client, "alice")
    user_id = register(client, "bob").json()["data"]["id"]
    response = client.put(
        f"/api/admin/users/{user_id}", json={"username": "alice"}, headers=auth_header(admin_token)
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Username already exists"


def test_patch_rejects_taken_email(client, admin_token):
    register(client, "alice", email="alice@example.com")
    user_id = register(client, "bob").json()["data"]["id"]
    response = client.put(
        f"/api/admin/users/{user_id}", json={"email": "alice@example.com"}, headers=auth_header(admin_token)
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Email already exists"


def test_patch_keeping_own_username_is_allowed(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    response = client.put(
        f"/api/admin/users/{user_id}", json={"username": "alice"}, headers=auth_header(admin_token)
    )
    assert response.status_code == 200


def test_admin_promotes_user_to_manager(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    client.put(f"/api/admin/users/{user_id}", json={"role": "MANAGER"}, headers=auth_header(admin_token))
    response = login(client, "alice")
    assert response.json()["data"]["role"] == "MANAGER"


def test_delete_then_get_is_not_found(client, admin_token):
    user_id = register(client, "alice").json()["data"]["id"]
    assert client.delete(f"/api/admin/users/{user_id}", headers=auth_header(admin_token)).status_code == 200
    assert client.get(f"/api/admin/users/{user_id}", headers=auth_header(admin_token)).status_code == 404
    assert client.delete(f"/api/admin/users/{user_id}", headers=auth_header(admin_token)).status_code == 404


def test_make_admin_promotes_existing_user(client):
    register(client, "alice")
    assert make_user_admin("alice", session_factory=SessionLocal)
    token = token_for(client, "alice")
    assert client.get("/api/admin/users", headers=auth_header(token)).status_code == 200


def test_make_admin_unknown_user(client):
    assert make_user_admin("nobody", session_factory=SessionLocal) is False


def test_oversized_user_id_is_rejected(client, admin_token):
    response = client.get(f"/api/admin/users/{10**20}", headers=auth_header(admin_token))
    assert response.status_code == 400
    assert response.json()["message"].startswith("user_id:")
