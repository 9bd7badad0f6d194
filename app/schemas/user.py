"""
User schemas untuk UserAuth API.
Menangani validasi untuk registrasi dan response profile.
"""

from datetime import datetime
from typing import Optional, Annotated

from pydantic import BaseModel, ConfigDict, Field, EmailStr, field_validator

from app.core.config import settings


class UserBase(BaseModel):
    """
    Base user schema dengan fields umum.
    """
    name: Annotated[str, Field(min_length=1, max_length=100)] = Field(
        ...,
        description="User display name"
    )
    email: EmailStr = Field(
        ...,
        description="User email address"
    )

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        """Trim whitespace dari nama."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower().strip()


class UserCreate(UserBase):
    """
    User registration schema.
    """
    password: str = Field(
        ...,
        description=f"User password (min {settings.PASSWORD_MIN_LENGTH} characters)"
    )

    @field_validator('password')
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Validate password memenuhi panjang minimal."""
        if len(v) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
            )
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "password": "123456"
            }
        }
    )


class UserResponse(BaseModel):
    """
    Public user data. Password hash tidak pernah disertakan.
    """
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="User display name")
    email: str = Field(..., description="User email address")
    created_at: Optional[datetime] = Field(None, description="Account creation timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "John Doe",
                "email": "john@example.com",
                "created_at": "2024-01-15T10:00:00Z"
            }
        }
    )

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        """Build response dari User model."""
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            created_at=user.created_at
        )
