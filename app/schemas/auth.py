"""
Authentication Pydantic schemas
"""

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """User registration schema"""
    username: str = Field(..., min_length=1, max_length=30)
    email: str = Field(..., min_length=6, max_length=60, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=5, max_length=72)

    class Config:
        extra = "forbid"
        strict = True


class UserLogin(BaseModel):
    """Login schema"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"
        strict = True


class TokenResponse(BaseModel):
    token: str
