"""
Fixtures for HTTP-level tests: the real application wired to in-memory
repositories, a mocked render service and a mocked mail sender.
"""
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from social_backend.application.use_cases.contact.send_contact_message import SendContactMessageUseCase
from social_backend.di import BaseContainer, set_container
from social_backend.di.providers import AuthProvider, ExternalServiceProvider, PostProvider
from social_backend.domain.repositories.post_repository import PostRepository
from social_backend.domain.repositories.user_repository import UserRepository
from social_backend.infrastructure.external.render_client import PNG_SIGNATURE, RenderClient

PNG_BYTES = PNG_SIGNATURE + b"integration-image"


@pytest.fixture
def render_requests():
    return []


@pytest.fixture
def render_client(render_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        render_requests.append(request)
        return httpx.Response(200, content=PNG_BYTES, headers={"content-type": "image/png"})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RenderClient(base_url="http://render.test", token="", http_client=http_client)


@pytest.fixture
def contact_sender():
    return AsyncMock()


@pytest.fixture
def container(user_repo, post_repo, render_client, contact_sender):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(PostRepository, post_repo)
    container.register_singleton(RenderClient, render_client)

    AuthProvider.register(container)
    PostProvider.register(container)
    ExternalServiceProvider.register(container)
    container.register_factory(
        SendContactMessageUseCase,
        lambda: SendContactMessageUseCase(sender=contact_sender),
    )
    return container


@pytest.fixture
def client(container):
    """Create test client running the full app lifespan against the in-memory container."""
    from social_backend.main import app

    set_container(container)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        set_container(None)


@pytest.fixture
def signup_and_login(client):
    """Register a user and return an Authorization header for them."""

    def _signup_and_login(username: str, password: str = "pw1") -> dict:
        response = client.post("/signup", json={"username": username, "password": password})
        assert response.status_code == 201
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _signup_and_login
