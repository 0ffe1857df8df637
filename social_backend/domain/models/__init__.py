from .identity import Identity
from .user import User
from .post import Post
from .reaction import Reaction

__all__ = ["Identity", "User", "Post", "Reaction"]
