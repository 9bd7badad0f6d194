"""
Schemas module untuk UserAuth API.
Berisi semua Pydantic schemas untuk request/response validation.
"""

from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.user import UserCreate, UserResponse
from app.schemas.token import IdentityClaim
from app.schemas.response import (
    MessageResponse,
    ErrorResponse,
    HealthCheckResponse
)

__all__ = [
    # Auth schemas
    "LoginRequest",
    "LoginResponse",

    # User schemas
    "UserCreate",
    "UserResponse",

    # Token schemas
    "IdentityClaim",

    # Response schemas
    "MessageResponse",
    "ErrorResponse",
    "HealthCheckResponse"
]
