"""
Fixtures for API tests: the real FastAPI app with a container holding real
use cases over mocked repositories (no database, no filesystem).
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from blog_backend.core.security import TokenService
from blog_backend.di.base_container import BaseContainer
from blog_backend.di.providers import AuthProvider, PostProvider, UserProvider
from blog_backend.domain.repositories.image_storage import ImageStorage
from blog_backend.domain.repositories.post_repository import PostRepository
from blog_backend.domain.repositories.user_repository import UserRepository


@pytest.fixture
def container(mock_user_repo, mock_post_repo, mock_image_storage, token_service):
    container = BaseContainer()
    container.register_singleton(UserRepository, mock_user_repo)
    container.register_singleton(PostRepository, mock_post_repo)
    container.register_singleton(ImageStorage, mock_image_storage)
    container.register_singleton(TokenService, token_service)
    AuthProvider.register(container)
    PostProvider.register(container)
    UserProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """Create test client with the test container and no MongoDB."""
    from blog_backend.main import app

    with patch("blog_backend.api.v1.dependencies.get_container", return_value=container), patch(
        "blog_backend.api.graphql.context.get_container", return_value=container
    ), patch("blog_backend.api.v1.image_controller.get_container", return_value=container), patch(
        "blog_backend.main.ensure_indexes", AsyncMock(return_value=True)
    ), patch("blog_backend.main.close_connection"):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def alice_headers(token_service, alice):
    return {"Authorization": f"Bearer {token_service.issue(alice.id, alice.email)}"}


@pytest.fixture
def bob_headers(token_service, bob):
    return {"Authorization": token_service.issue(bob.id, bob.email)}
