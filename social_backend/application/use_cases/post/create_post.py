# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.identity import Identity
from ....domain.models.post import Post
from ....domain.exceptions import InvalidInputError
from ...dto.post_dto import PostCreateRequest, PostResponse, to_post_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for publishing a new post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, identity: Identity, request: PostCreateRequest) -> PostResponse:
        """
        Create a post owned by the verified caller

        Args:
            identity: Identity produced by the token verifier
            request: Post creation request

        Returns:
            PostResponse with the stored post

        Raises:
            InvalidInputError: If title or content is empty
        """
        if not request.title or not request.title.strip() or not request.content or not request.content.strip():
            raise InvalidInputError("Title and content are required")

        new_post = Post(
            id=None,
            owner_id=identity.user_id,
            title=request.title,
            content=request.content,
        )
        saved_post = await self.post_repository.save(new_post)
        saved_post.owner_username = identity.username
        logger.info("User %s created post %s", identity.user_id, saved_post.id)

        return to_post_response(saved_post)
