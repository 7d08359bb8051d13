"""
Pydantic schemas for the sample user directory.
"""
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """User role enum."""
    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    """Schema for user response."""
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="User's full name")
    email: str = Field(..., description="User email address")
    role: UserRole = Field(UserRole.USER, description="User role")
    is_active: bool = Field(True, description="Whether the user is active")
    created_at: datetime = Field(..., description="Creation timestamp")

    class Config:
        """Pydantic config."""
        from_attributes = True


class UserSummary(BaseModel):
    """Condensed user representation for listings."""
    id: str
    name: str
