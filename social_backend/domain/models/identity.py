from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Verified caller identity reconstructed from an access token on each request"""
    user_id: str
    username: str
