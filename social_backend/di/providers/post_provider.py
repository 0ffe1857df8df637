from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...domain.services.ownership_guard import OwnershipGuard
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...application.use_cases.post.add_reaction import AddReactionUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the ownership guard and all post use cases.
        Use cases are created on-demand via factories.
        """
        container.register_singleton(OwnershipGuard, OwnershipGuard())

        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository)
            )
        )

        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(
                post_repository=container.get(PostRepository)
            )
        )

        container.register_factory(
            UpdatePostUseCase,
            lambda: UpdatePostUseCase(
                post_repository=container.get(PostRepository),
                ownership_guard=container.get(OwnershipGuard),
            )
        )

        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(
                post_repository=container.get(PostRepository),
                ownership_guard=container.get(OwnershipGuard),
            )
        )

        container.register_factory(
            AddReactionUseCase,
            lambda: AddReactionUseCase(
                post_repository=container.get(PostRepository)
            )
        )
