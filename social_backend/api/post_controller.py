# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ..application.dto.auth_dto import MessageResponse
from ..application.dto.post_dto import PostCreateRequest, PostUpdateRequest, PostResponse
from ..application.use_cases.post.create_post import CreatePostUseCase
from ..application.use_cases.post.list_posts import ListPostsUseCase
from ..application.use_cases.post.update_post import UpdatePostUseCase
from ..application.use_cases.post.delete_post import DeletePostUseCase
from ..application.use_cases.post.add_reaction import AddReactionUseCase
from ..domain.models.identity import Identity
from ..domain.models.reaction import Reaction
from ..di.container import get_container
from .dependencies import get_current_identity


router = APIRouter(tags=["posts"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    identity: Identity = Depends(get_current_identity),
) -> MessageResponse:
    """
    Publish a post owned by the authenticated user

    Args:
        request: Post creation request
        identity: Verified caller identity (from dependency)
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)

    await create_post_use_case.execute(identity=identity, request=request)
    return MessageResponse(message="Post created successfully")


@router.get("", response_model=List[PostResponse])
async def list_posts() -> List[PostResponse]:
    """
    List every post with its author's username

    Returns:
        List of PostResponse objects
    """
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)

    return await list_posts_use_case.execute()


@router.put("/{post_id}", response_model=MessageResponse)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    identity: Identity = Depends(get_current_identity),
) -> MessageResponse:
    """
    Edit a post the authenticated user owns

    Args:
        post_id: ID of the post
        request: New title and content
        identity: Verified caller identity (from dependency)
    """
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)

    await update_post_use_case.execute(identity=identity, post_id=post_id, request=request)
    return MessageResponse(message="Post updated successfully")


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    identity: Identity = Depends(get_current_identity),
) -> MessageResponse:
    """
    Delete a post the authenticated user owns

    Args:
        post_id: ID of the post
        identity: Verified caller identity (from dependency)
    """
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)

    await delete_post_use_case.execute(identity=identity, post_id=post_id)
    return MessageResponse(message="Post deleted successfully")


@router.post("/{post_id}/like", response_model=MessageResponse)
async def like_post(post_id: str) -> MessageResponse:
    """Add one like to a post (anonymous)"""
    container = get_container()
    add_reaction_use_case = container.get(AddReactionUseCase)

    await add_reaction_use_case.execute(post_id=post_id, reaction=Reaction.LIKE)
    return MessageResponse(message="Like added successfully")


@router.post("/{post_id}/dislike", response_model=MessageResponse)
async def dislike_post(post_id: str) -> MessageResponse:
    """Add one dislike to a post (anonymous)"""
    container = get_container()
    add_reaction_use_case = container.get(AddReactionUseCase)

    await add_reaction_use_case.execute(post_id=post_id, reaction=Reaction.DISLIKE)
    return MessageResponse(message="Dislike added successfully")
