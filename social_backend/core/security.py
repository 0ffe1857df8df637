
# Standard library imports
import logging
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from ..domain.models.identity import Identity
from ..domain.exceptions import ForbiddenError, UnauthenticatedError

logger = logging.getLogger(__name__)

# Claim names carried by access tokens
USER_ID_CLAIM = "userId"
USERNAME_CLAIM = "username"

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., userId, username)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    token = jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )
    return token


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is malformed, badly signed or expired
    """
    settings = get_settings()
    try:
        decoded = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
        return decoded
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")


def create_access_token(identity: Identity) -> str:
    """Issue an access token embedding the caller's identity."""
    return create_jwt_token({
        USER_ID_CLAIM: identity.user_id,
        USERNAME_CLAIM: identity.username,
    })


class TokenVerifier:
    """
    Stateless bearer token verification.

    Runs on every protected request; nothing is cached between calls.
    """

    def verify(self, raw_token: Optional[str]) -> Identity:
        """
        Verify a raw bearer token and return the identity it carries

        Args:
            raw_token: Token string taken from the Authorization header, or None

        Returns:
            Identity embedded in the token

        Raises:
            UnauthenticatedError: If no token was presented
            ForbiddenError: If the token is malformed, tampered with or expired
        """
        if raw_token is None or not raw_token.strip():
            raise UnauthenticatedError("Access token required")

        try:
            payload = decode_jwt_token(raw_token.strip())
        except ValueError as exception:
            logger.warning("Rejected access token: %s", exception)
            raise ForbiddenError("Invalid or expired token")

        user_id = payload.get(USER_ID_CLAIM)
        username = payload.get(USERNAME_CLAIM)
        if not user_id or not username:
            logger.warning("Rejected access token: missing identity claims")
            raise ForbiddenError("Invalid or expired token")

        return Identity(user_id=str(user_id), username=str(username))
