from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase
from .add_reaction import AddReactionUseCase

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "AddReactionUseCase",
]
