from enum import Enum

from ..constants.post_fields import PostFields


class Reaction(str, Enum):
    """Anonymous reactions a post can receive; each maps to a counter field"""
    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def counter_field(self) -> str:
        return PostFields.LIKES if self is Reaction.LIKE else PostFields.DISLIKES
