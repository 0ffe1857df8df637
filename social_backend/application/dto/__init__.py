from .auth_dto import SignupRequest, LoginRequest, TokenResponse, MessageResponse
from .user_dto import UserResponse
from .post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    PostOwnerResponse,
    PostResponse,
    to_post_response,
)
from .contact_dto import ContactRequest, ContactResponse

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "MessageResponse",
    "UserResponse",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostOwnerResponse",
    "PostResponse",
    "to_post_response",
    "ContactRequest",
    "ContactResponse",
]
