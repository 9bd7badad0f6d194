"""
Custom exceptions untuk UserAuth API.
Semua custom exceptions harus inherit dari base exceptions ini.
"""

from enum import Enum
from typing import Optional, Dict, Any

from app.core.constants import ResponseMessage


class UserAuthException(Exception):
    """Base exception untuk semua custom exceptions di UserAuth API."""

    error_code: str = "ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status code
            details: Additional error details
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(UserAuthException):
    """Exception untuk argumen plaintext/hash yang tidak valid."""

    error_code = "INVALID_INPUT"

    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class DuplicateAccountError(UserAuthException):
    """Exception untuk registrasi dengan email yang sudah terdaftar."""

    error_code = "DUPLICATE_ACCOUNT"

    def __init__(self, message: str = ResponseMessage.USER_ALREADY_EXISTS):
        super().__init__(message, status_code=400)


class BadCredentialsError(UserAuthException):
    """Exception untuk kredensial login yang tidak cocok."""

    error_code = "BAD_CREDENTIALS"

    def __init__(self, message: str = ResponseMessage.INVALID_CREDENTIALS):
        super().__init__(message, status_code=400)


class NotFoundError(UserAuthException):
    """Exception untuk resource tidak ditemukan."""

    error_code = "NOT_FOUND"

    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=404, details=details)


class MisconfigurationError(UserAuthException):
    """Exception untuk konfigurasi server yang tidak lengkap (misal: signing secret kosong)."""

    error_code = "MISCONFIGURATION"

    def __init__(self, message: str = "Server is misconfigured"):
        super().__init__(message, status_code=500)


class TokenError(UserAuthException):
    """Exception untuk error terkait session token."""

    error_code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid token", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=401, details=details)


class MalformedTokenError(TokenError):
    """Token tidak bisa di-parse (jumlah segment, encoding, atau isi payload)."""

    error_code = "MALFORMED_TOKEN"

    def __init__(self, message: str = "Malformed token"):
        super().__init__(message)


class InvalidSignatureError(TokenError):
    """Signature token tidak cocok dengan secret server."""

    error_code = "INVALID_SIGNATURE"

    def __init__(self, message: str = "Token signature verification failed"):
        super().__init__(message)


class ExpiredTokenError(TokenError):
    """Exception untuk token yang sudah expired."""

    error_code = "EXPIRED_TOKEN"

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, details={"expired": True})


class RejectionReason(str, Enum):
    """Alasan Access Guard menolak request."""
    NO_TOKEN = "NO_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"


class AuthenticationRejected(UserAuthException):
    """
    Request ditolak di Access Guard.
    Detail kegagalan verifikasi tidak pernah dikirim ke client.
    """

    error_code = "AUTHENTICATION_REJECTED"

    def __init__(self, reason: RejectionReason, message: Optional[str] = None):
        if message is None:
            if reason is RejectionReason.NO_TOKEN:
                message = ResponseMessage.NOT_AUTHENTICATED
            else:
                message = ResponseMessage.TOKEN_INVALID
        self.reason = reason
        super().__init__(message, status_code=401, details={"reason": reason.value})
