from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password hash)"""
    id: str
    username: str
