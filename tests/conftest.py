"""
Shared pytest fixtures for blog backend tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from blog_backend.application.auth_gate import Authenticated
from blog_backend.core.security import TokenService
from blog_backend.domain.models.post import Post
from blog_backend.domain.models.user import User
from blog_backend.domain.repositories.image_storage import ImageStorage
from blog_backend.domain.repositories.post_repository import PostRepository
from blog_backend.domain.repositories.user_repository import UserRepository
from blog_backend.utils.datetime_utils import utc_now

TEST_SECRET = "test_jwt_secret"

ALICE_ID = "64b7f0c2a1b2c3d4e5f60001"
BOB_ID = "64b7f0c2a1b2c3d4e5f60002"
POST_ID = "64b7f0c2a1b2c3d4e5f6a001"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_blog_db",
        "JWT_SECRET_KEY": TEST_SECRET,
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches the modules that read it at call time."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = TEST_SECRET
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.image_upload_dir = "images"
    mock.cors_origins = ["*"]
    mock.log_level = "INFO"

    with patch("blog_backend.core.config.get_settings", return_value=mock), patch(
        "blog_backend.di.providers.security_provider.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def token_service():
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_post_repo():
    """Mock PostRepository with async methods."""
    return AsyncMock(spec=PostRepository)


@pytest.fixture
def mock_image_storage():
    return AsyncMock(spec=ImageStorage)


@pytest.fixture
def alice():
    return User(
        id=ALICE_ID,
        name="Alice",
        email="alice@example.com",
        hashed_password="$2b$12$hashed",
        posts=[POST_ID],
    )


@pytest.fixture
def bob():
    return User(
        id=BOB_ID,
        name="Bob",
        email="bob@example.com",
        hashed_password="$2b$12$hashed",
    )


@pytest.fixture
def alice_identity():
    return Authenticated(user_id=ALICE_ID, email="alice@example.com")


@pytest.fixture
def bob_identity():
    return Authenticated(user_id=BOB_ID, email="bob@example.com")


@pytest.fixture
def alices_post():
    now = utc_now()
    return Post(
        id=POST_ID,
        title="First post",
        content="Hello there, world",
        image_url="images/abc.png",
        creator_id=ALICE_ID,
        created_at=now,
        updated_at=now,
    )
