"""
Services module untuk UserAuth API.
Berisi business logic untuk registrasi dan autentikasi.
"""

from app.services.auth import AuthService
from app.services.user import UserService

__all__ = [
    "AuthService",
    "UserService",
]
