# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.reaction import Reaction
from ....domain.exceptions import NotFoundError
from ...dto.post_dto import PostResponse, to_post_response


class AddReactionUseCase:
    """
    Use case for liking or disliking a post.

    Anonymous and unlimited: no voter identity is recorded, so every call
    adds exactly one to the chosen counter.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, reaction: Reaction) -> PostResponse:
        """
        Increment the counter for a reaction

        Args:
            post_id: ID of the post
            reaction: Reaction.LIKE or Reaction.DISLIKE

        Returns:
            PostResponse with updated counters

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_repository.increment_counter(post_id, reaction.counter_field)
        if post is None:
            raise NotFoundError("Post not found")
        return to_post_response(post)
