"""
User Models - credentials and the local mirror of a provider account
"""
from typing import Optional

from pydantic import BaseModel


class Credentials(BaseModel):
    """Signup/login request; the identity provider decides what is acceptable"""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    email: Optional[str] = None
