# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    ExternalServiceProvider,
    PostProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (AuthProvider, PostProvider) - depend on repositories
    4. External collaborators (ExternalServiceProvider)
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        PostProvider.register(self)
        ExternalServiceProvider.register(self)


# Global container instance (singleton pattern)
_container: BaseContainer | None = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        Container with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: BaseContainer | None) -> None:
    """Replace the global container (None resets it to be rebuilt lazily)"""
    global _container
    _container = container
