# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ..core.security import TokenVerifier
from ..domain.models.identity import Identity
from ..di.container import get_container


# auto_error=False so a missing header reaches the verifier and becomes a 401
security_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Identity:
    """
    FastAPI dependency that verifies the bearer token on every protected request

    Args:
        credentials: HTTP Bearer token credentials, None when absent

    Returns:
        Identity embedded in the token, passed to the handler as a parameter

    Raises:
        UnauthenticatedError: If no token was presented
        ForbiddenError: If the token is invalid or expired
    """
    raw_token = credentials.credentials if credentials is not None else None

    container = get_container()
    token_verifier = container.get(TokenVerifier)
    return token_verifier.verify(raw_token)
