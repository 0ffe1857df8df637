# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.services.ownership_guard import OwnershipGuard
from ....domain.models.identity import Identity
from ....domain.exceptions import InvalidInputError, NotFoundError
from ...dto.post_dto import PostUpdateRequest, PostResponse, to_post_response

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for editing the title and content of an owned post"""

    def __init__(self, post_repository: PostRepository, ownership_guard: OwnershipGuard) -> None:
        self.post_repository = post_repository
        self.ownership_guard = ownership_guard

    async def execute(self, identity: Identity, post_id: str, request: PostUpdateRequest) -> PostResponse:
        """
        Overwrite title and content of a post

        Args:
            identity: Identity produced by the token verifier
            post_id: ID of the post to edit
            request: New title and content

        Returns:
            PostResponse with the updated post

        Raises:
            NotFoundError: If the post does not exist (or vanished before the write)
            ForbiddenError: If the caller does not own the post
            InvalidInputError: If title or content is empty
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")

        self.ownership_guard.authorize(identity, post)

        if not request.title or not request.title.strip() or not request.content or not request.content.strip():
            raise InvalidInputError("Title and content are required")

        post.title = request.title
        post.content = request.content
        saved_post = await self.post_repository.save(post)
        if saved_post is None:
            raise NotFoundError("Post not found")
        logger.info("User %s updated post %s", identity.user_id, post_id)

        return to_post_response(saved_post)
