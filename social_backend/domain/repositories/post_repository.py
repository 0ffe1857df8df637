from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def list_with_owners(self) -> List[Post]:
        """List every post in insertion order with the owner's username filled in"""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Optional[Post]:
        """Save post (create or update title/content); None when an update matches no post"""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete post by ID, returns False if nothing was removed"""
        pass

    @abstractmethod
    async def increment_counter(self, post_id: str, field: str) -> Optional[Post]:
        """Atomically add 1 to a reaction counter, returns None if the post does not exist"""
        pass
