"""
Authentication service untuk UserAuth API.
Menangani login: verifikasi kredensial dan issuance session token.
"""

import logging
from functools import lru_cache
from typing import Any, Dict

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import BadCredentialsError
from app.core.security import hasher, token_issuer
from app.services.user import UserService

logger = logging.getLogger(__name__)


@lru_cache()
def _dummy_hash() -> str:
    """
    Hash dummy untuk menyamakan waktu respons login.
    Email yang tidak terdaftar tetap menjalankan satu verifikasi Argon2.
    """
    return hasher.hash("userauth-timing-equalization")


class AuthService:
    """
    Service class untuk authentication operations.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize auth service.

        Args:
            db: Database session
        """
        self.db = db
        self.user_service = UserService(db)

    async def authenticate_user(self, email: str, password: str) -> Dict[str, Any]:
        """
        Authenticate user dengan email dan password.

        Proses:
        1. Cari user berdasarkan email
        2. Verifikasi password (constant-time)
        3. Upgrade hash jika parameter hashing sudah dinaikkan
        4. Issue session token

        Args:
            email: User email
            password: Plain text password

        Returns:
            Dict dengan token, expires_in, dan user object

        Raises:
            BadCredentialsError: Jika email tidak terdaftar atau password salah
        """
        user = await self.user_service.get_user_by_email(email)

        if user is None:
            # Dummy hash dihitung di worker, bukan di event loop
            await run_in_threadpool(lambda: hasher.verify(password, _dummy_hash()))
            logger.info("Login failed: unknown email")
            raise BadCredentialsError()

        is_valid = await run_in_threadpool(hasher.verify, password, user.password_hash)
        if not is_valid:
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise BadCredentialsError()

        if hasher.needs_rehash(user.password_hash):
            new_hash = await run_in_threadpool(hasher.hash, password)
            await self.user_service.update_password_hash(user, new_hash)
            logger.info(f"Password hash upgraded for user {user.id}")

        token = token_issuer.issue(user.identity_claim(), settings.SECRET_KEY)
        logger.info(f"Login successful for user {user.id}")

        return {
            "token": token,
            "expires_in": int(token_issuer.default_ttl.total_seconds()),
            "user": user
        }
