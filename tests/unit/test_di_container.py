"""
Unit tests for the dependency injection container and providers.
"""
import pytest
from social_backend.application.use_cases.auth.login_user import LoginUserUseCase
from social_backend.application.use_cases.post.delete_post import DeletePostUseCase
from social_backend.core.security import TokenVerifier
from social_backend.di.base_container import BaseContainer
from social_backend.di.providers import AuthProvider, PostProvider
from social_backend.domain.repositories.post_repository import PostRepository
from social_backend.domain.repositories.user_repository import UserRepository
from social_backend.domain.services.ownership_guard import OwnershipGuard


class TestBaseContainer:

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_fresh_instance(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="TokenVerifier"):
            BaseContainer().get(TokenVerifier)

    def test_later_registration_replaces_earlier(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        container.register_singleton("thing", "fixed")
        assert container.get("thing") == "fixed"
        assert container.is_registered("thing")


class TestProviders:

    def test_auth_and_post_providers_wire_use_cases(self, user_repo, post_repo):
        container = BaseContainer()
        container.register_singleton(UserRepository, user_repo)
        container.register_singleton(PostRepository, post_repo)

        AuthProvider.register(container)
        PostProvider.register(container)

        assert isinstance(container.get(TokenVerifier), TokenVerifier)
        login = container.get(LoginUserUseCase)
        assert login.user_repository is user_repo
        delete = container.get(DeletePostUseCase)
        assert delete.post_repository is post_repo
        assert delete.ownership_guard is container.get(OwnershipGuard)
