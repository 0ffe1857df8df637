from typing import Optional

from pydantic import AliasChoices, BaseModel, EmailStr, Field


class ContactRequest(BaseModel):
    """DTO for contact form submission (legacy Portuguese field names accepted)"""
    name: str = Field(min_length=1, max_length=200, validation_alias=AliasChoices("name", "nome"))
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=50, validation_alias=AliasChoices("phone", "telefone"))
    message: str = Field(min_length=1, max_length=5000, validation_alias=AliasChoices("message", "mensagem"))


class ContactResponse(BaseModel):
    """DTO for contact form delivery result"""
    success: bool
    error: Optional[str] = None
