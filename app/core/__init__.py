"""
Core module untuk UserAuth API.
Berisi komponen inti aplikasi seperti konfigurasi, keamanan, exceptions, dan konstanta.
"""

from app.core.config import settings
from app.core.exceptions import (
    UserAuthException,
    InvalidInputError,
    DuplicateAccountError,
    BadCredentialsError,
    NotFoundError,
    MisconfigurationError,
    TokenError,
    MalformedTokenError,
    InvalidSignatureError,
    ExpiredTokenError,
    AuthenticationRejected,
    RejectionReason
)

__all__ = [
    "settings",
    "UserAuthException",
    "InvalidInputError",
    "DuplicateAccountError",
    "BadCredentialsError",
    "NotFoundError",
    "MisconfigurationError",
    "TokenError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "ExpiredTokenError",
    "AuthenticationRejected",
    "RejectionReason"
]
