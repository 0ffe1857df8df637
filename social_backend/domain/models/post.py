# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class Post:
    """
    Pure domain model for Post entity - no external dependencies.

    ``owner_id`` references the creating user and never changes. The
    ``likes``/``dislikes`` counters only ever grow. ``owner_username`` is a
    read-side denormalization filled in when posts are listed; it is never
    persisted on the post itself.
    """
    id: Optional[str]
    owner_id: str
    title: str
    content: str
    likes: int = 0
    dislikes: int = 0
    owner_username: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.owner_id:
            raise ValueError("Owner user ID is required")
        if not self.title or not self.title.strip():
            raise ValueError("Post title is required")
        if not self.content or not self.content.strip():
            raise ValueError("Post content is required")
        if self.likes < 0 or self.dislikes < 0:
            raise ValueError("Reaction counters cannot be negative")
