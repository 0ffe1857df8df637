"""
API layer for the social posts backend.

Exposes the HTTP endpoints: signup/login, post CRUD and reactions,
screenshots, contact email and health.
"""

from .auth_controller import router as auth_router
from .post_controller import router as post_router
from .screenshot_controller import router as screenshot_router
from .contact_controller import router as contact_router
from .health_controller import router as health_router
from .error_handlers import register_error_handlers


__all__ = [
    "auth_router",
    "post_router",
    "screenshot_router",
    "contact_router",
    "health_router",
    "register_error_handlers",
]
