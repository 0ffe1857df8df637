# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.services.ownership_guard import OwnershipGuard
from ....domain.models.identity import Identity
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for removing an owned post"""

    def __init__(self, post_repository: PostRepository, ownership_guard: OwnershipGuard) -> None:
        self.post_repository = post_repository
        self.ownership_guard = ownership_guard

    async def execute(self, identity: Identity, post_id: str) -> None:
        """
        Delete a post

        Args:
            identity: Identity produced by the token verifier
            post_id: ID of the post to delete

        Raises:
            NotFoundError: If the post does not exist (or vanished before removal)
            ForbiddenError: If the caller does not own the post
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")

        self.ownership_guard.authorize(identity, post)

        deleted = await self.post_repository.delete(post_id)
        if not deleted:
            raise NotFoundError("Post not found")
        logger.info("User %s deleted post %s", identity.user_id, post_id)
