from typing import Optional

from pydantic import BaseModel


class SignupRequest(BaseModel):
    """DTO for account registration request (emptiness is checked by the use case)"""
    username: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """DTO for login request"""
    username: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    """DTO for plain confirmation responses"""
    message: str
