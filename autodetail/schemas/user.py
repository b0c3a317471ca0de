"""
Pydantic schemas for login and the current user.
"""
from pydantic import BaseModel, EmailStr, ConfigDict
from typing import Optional


class LoginRequest(BaseModel):
    """Schema for login request."""
    email: EmailStr
    password: str


class User(BaseModel):
    """Schema for the logged-in user."""
    id: int
    email: str
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
