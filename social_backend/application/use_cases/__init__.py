from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
    AddReactionUseCase,
)
from .contact import SendContactMessageUseCase
from .screenshot import CaptureScreenshotUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "AddReactionUseCase",
    "SendContactMessageUseCase",
    "CaptureScreenshotUseCase",
]
