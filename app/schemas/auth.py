"""
Authentication schemas untuk UserAuth API.
Menangani validasi untuk login request dan response.
"""

from pydantic import BaseModel, ConfigDict, Field, EmailStr, field_validator

from app.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """
    Login request schema.
    """
    email: EmailStr = Field(
        ...,
        description="User email address"
    )
    password: str = Field(
        ...,
        min_length=1,
        description="User password"
    )

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower().strip()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john@example.com",
                "password": "123456"
            }
        }
    )


class LoginResponse(BaseModel):
    """
    Login response dengan session token.
    """
    token: str = Field(
        ...,
        description="Bearer session token"
    )
    token_type: str = Field(
        default="bearer",
        description="Token type"
    )
    expires_in: int = Field(
        ...,
        description="Token lifetime in seconds"
    )
    user: UserResponse = Field(
        ...,
        description="Authenticated user"
    )
