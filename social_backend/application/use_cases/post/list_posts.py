# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse, to_post_response


class ListPostsUseCase:
    """Use case for listing every post with its owner's username"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self) -> List[PostResponse]:
        """
        List all posts (public, unpaginated, store order)

        Returns:
            List of PostResponse objects
        """
        posts = await self.post_repository.list_with_owners()
        return [to_post_response(post) for post in posts]
