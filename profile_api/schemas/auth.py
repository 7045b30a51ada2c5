"""
Authentication schemas for user registration, login, and the current user.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime


class UserRegistrationSchema(BaseModel):
    """Schema for user registration."""
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class UserLoginSchema(BaseModel):
    """Schema for user login."""
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class RegisteredSchema(BaseModel):
    message: str
    id: str


class TokenSchema(BaseModel):
    """Issued access token, also set as the auth cookie."""
    token: str = Field(..., description="JWT access token")


class UserProfileSchema(BaseModel):
    """Schema for user account information."""
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)
