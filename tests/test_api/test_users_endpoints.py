"""Tests for /api/users profile endpoints."""

import pytest

from acemarket.domain.models.user import User
from acemarket.infrastructure.database import database

IMAGE = "data:image/png;base64,iVBORw0KGgo="


@pytest.mark.api
def test_get_profile(client, alice):
    response = client.get(f"/api/users/{alice['user']['id']}")

    assert response.status_code == 200
    assert response.json()["username"] == "alice"
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
    assert response.headers["pragma"] == "no-cache"


@pytest.mark.api
def test_get_unknown_profile(client):
    response = client.get("/api/users/missing")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "User not found"


@pytest.mark.api
def test_update_own_profile(client, alice):
    url = f"/api/users/{alice['user']['id']}"

    response = client.put(
        url,
        json={"isRealtor": True, "company": "Acme Realty", "specialties": ["Retail", ""]},
        headers=alice["headers"],
    )

    assert response.status_code == 200
    data = response.json()
    assert data["isRealtor"] is True
    assert data["company"] == "Acme Realty"
    assert data["specialties"] == ["Retail"]
    assert data["username"] == "alice"
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"


@pytest.mark.api
def test_update_other_profile_forbidden(client, alice, bob):
    response = client.put(
        f"/api/users/{bob['user']['id']}", json={"bio": "hijacked"}, headers=alice["headers"]
    )

    assert response.status_code == 403
    assert response.json()["error"]["message"] == "You can only update your own profile"


@pytest.mark.api
def test_update_profile_requires_auth(client, alice):
    response = client.put(f"/api/users/{alice['user']['id']}", json={"bio": "x"})

    assert response.status_code == 401


@pytest.mark.api
def test_update_to_taken_email_conflicts(client, alice, bob):
    response = client.put(
        f"/api/users/{alice['user']['id']}",
        json={"email": "bob@example.com"},
        headers=alice["headers"],
    )

    assert response.status_code == 409


@pytest.mark.api
def test_update_blank_username_rejected(client, alice):
    response = client.put(
        f"/api/users/{alice['user']['id']}", json={"username": "  "}, headers=alice["headers"]
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Username cannot be empty"


@pytest.mark.api
def test_password_change_allows_new_login(client, alice):
    client.put(
        f"/api/users/{alice['user']['id']}", json={"password": "n3w-pass"}, headers=alice["headers"]
    )

    old = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    new = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "n3w-pass"})

    assert old.status_code == 401
    assert new.status_code == 200


def _stored_password_hash(user_id):
    session = database.session()
    try:
        return session.get(User, user_id).password_hash
    finally:
        session.close()


@pytest.mark.api
def test_same_password_keeps_stored_hash(client, alice):
    before = _stored_password_hash(alice["user"]["id"])

    response = client.put(
        f"/api/users/{alice['user']['id']}", json={"password": "secret123"}, headers=alice["headers"]
    )

    assert response.status_code == 200
    assert _stored_password_hash(alice["user"]["id"]) == before


@pytest.mark.api
def test_new_password_replaces_stored_hash(client, alice):
    before = _stored_password_hash(alice["user"]["id"])

    client.put(
        f"/api/users/{alice['user']['id']}", json={"password": "n3w-pass"}, headers=alice["headers"]
    )

    assert _stored_password_hash(alice["user"]["id"]) != before


@pytest.mark.api
def test_avatar_upload_and_clear(client, alice, image_storage):
    url = f"/api/users/{alice['user']['id']}"

    uploaded = client.put(url, json={"avatar": IMAGE}, headers=alice["headers"]).json()
    assert uploaded["avatarUrl"].startswith("https://res.cloudinary.com/")
    assert image_storage.uploads == [IMAGE]

    cleared = client.put(url, json={"avatarUrl": ""}, headers=alice["headers"]).json()
    assert cleared["avatarUrl"] is None


@pytest.mark.api
def test_avatar_shows_on_posts(client, alice, image_storage):
    client.put(f"/api/users/{alice['user']['id']}", json={"avatar": IMAGE}, headers=alice["headers"])
    client.post("/api/posts", json={"type": "NEED", "content": "Need land"}, headers=alice["headers"])

    posts = client.get("/api/posts").json()

    assert posts[0]["userId"]["avatarUrl"].startswith("https://res.cloudinary.com/")
