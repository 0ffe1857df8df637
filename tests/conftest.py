"""
Shared pytest fixtures for social_backend tests.

The in-memory repositories stand in for MongoDB: they keep insertion order,
reject duplicate usernames the way the unique index does and increment
counters in place.
"""
import os
from dataclasses import replace
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from social_backend.domain.constants import PostFields
from social_backend.domain.exceptions import ConflictError
from social_backend.domain.models.post import Post
from social_backend.domain.models.user import User
from social_backend.domain.repositories.post_repository import PostRepository
from social_backend.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.indexes_ensured = False

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return replace(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return replace(user) if user else None

    async def save(self, user: User) -> User:
        if any(existing.username == user.username for existing in self.users.values()):
            raise ConflictError("Username already exists")
        stored = replace(user, id=str(ObjectId()))
        self.users[stored.id] = stored
        return replace(stored)

    async def ensure_indexes(self) -> None:
        self.indexes_ensured = True


class InMemoryPostRepository(PostRepository):
    def __init__(self, user_repository: InMemoryUserRepository) -> None:
        self.user_repository = user_repository
        self.posts: Dict[str, Post] = {}

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        return replace(post) if post else None

    async def list_with_owners(self) -> List[Post]:
        result = []
        for post in self.posts.values():
            owner = self.user_repository.users.get(post.owner_id)
            result.append(replace(post, owner_username=owner.username if owner else None))
        return result

    async def save(self, post: Post) -> Optional[Post]:
        if post.id:
            if post.id not in self.posts:
                return None
            stored = replace(self.posts[post.id], title=post.title, content=post.content)
        else:
            stored = replace(post, id=str(ObjectId()), owner_username=None)
        self.posts[stored.id] = stored
        return replace(stored)

    async def delete(self, post_id: str) -> bool:
        return self.posts.pop(post_id, None) is not None

    async def increment_counter(self, post_id: str, field: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is None:
            return None
        if field == PostFields.LIKES:
            post.likes += 1
        elif field == PostFields.DISLIKES:
            post.dislikes += 1
        else:
            raise ValueError(f"Unsupported reaction counter: {field}")
        return replace(post)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_social_posts",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.render_service_url = "http://render.test"
    mock.render_service_token = ""
    mock.smtp_host = "smtp.test"
    mock.smtp_port = 465
    mock.smtp_user = "apikey"
    mock.smtp_use_tls = True
    mock.email_provider_api_key = "SG.test-key"
    mock.contact_recipient = "owner@example.com"
    mock.email_from = "noreply@example.com"
    mock.email_from_name = "Social Posts"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("social_backend.core.config.get_settings", return_value=mock), patch(
        "social_backend.core.security.get_settings", return_value=mock
    ), patch(
        "social_backend.infrastructure.external.render_client.get_settings", return_value=mock
    ), patch(
        "social_backend.utils.email_service.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo(user_repo):
    return InMemoryPostRepository(user_repo)
