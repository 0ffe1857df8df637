from .config import Settings, get_settings
from .logging_config import setup_logging
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    create_access_token,
    TokenVerifier,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
    "create_access_token",
    "TokenVerifier",
]
