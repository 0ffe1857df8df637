from typing import Optional

from pydantic import BaseModel

from ...domain.models.post import Post


class PostCreateRequest(BaseModel):
    """DTO for post creation request"""
    title: Optional[str] = None
    content: Optional[str] = None


class PostUpdateRequest(BaseModel):
    """DTO for post update request"""
    title: Optional[str] = None
    content: Optional[str] = None


class PostOwnerResponse(BaseModel):
    """Owner reference embedded in a listed post"""
    id: str
    username: str


class PostResponse(BaseModel):
    """DTO for post response"""
    id: str
    title: str
    content: str
    user: Optional[PostOwnerResponse] = None
    likes: int = 0
    dislikes: int = 0


def to_post_response(post: Post) -> PostResponse:
    """Build the public representation of a post; the owner is omitted when its username is unknown."""
    owner = None
    if post.owner_username is not None:
        owner = PostOwnerResponse(id=post.owner_id, username=post.owner_username)

    return PostResponse(
        id=post.id or "",
        title=post.title,
        content=post.content,
        user=owner,
        likes=post.likes,
        dislikes=post.dislikes,
    )
