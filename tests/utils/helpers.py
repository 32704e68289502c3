"""Helpers shared by the API tests."""


def register(client, username, email=None, password="secret123", **extra):
    """POST /api/auth/register with sensible defaults."""
    body = {"username": username, "email": email or f"{username}@example.com", "password": password}
    body.update(extra)
    return client.post("/api/auth/register", json=body)


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def create_post(client, headers, body):
    response = client.post("/api/posts", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
