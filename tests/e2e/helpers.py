"""Shared steps for API tests."""

from fastapi.testclient import TestClient

from worldnews.domain.repository import UserRepository
from worldnews.domain.value.types import Handle

PASSWORD = "s3cret-pass"


def register(client: TestClient, username: str, country: str = "US", **fields):
    """Register an account; the client keeps its session cookie."""
    response = client.post(
        "/auth/register",
        json={
            "contact": f"{username}@example.com",
            "password": PASSWORD,
            "name": username.title(),
            "username": username,
            "country": country,
            **fields,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["session"]


def login(client: TestClient, username: str):
    """Sign in as a previously registered account."""
    return client.post(
        "/auth/login",
        json={"identifier": f"{username}@example.com", "password": PASSWORD},
    )


def promote_to_admin(client: TestClient, username: str) -> None:
    """Grant the admin role directly in the app's user store."""

    async def _promote() -> None:
        repo = await client.app_container.get(UserRepository)
        user = await repo.find_by_username(Handle(username))
        await repo.save(user.model_copy(update={"is_admin": True}))

    client.portal.call(_promote)


def create_post(client: TestClient, **fields):
    """Publish a post as the client's current session."""
    body = {
        "country": "US",
        "category": "culture",
        "title": "Museum reopens after renovation",
        "content": "The east wing welcomes visitors again from Monday.",
        "image": "https://images.example.com/museum.jpg",
        **fields,
    }
    response = client.post("/posts", json=body)
    assert response.status_code == 201, response.text
    return response.json()["post"]
