"""
User service untuk UserAuth API.
Menangani account storage dan registrasi user.
"""

import logging
from typing import Optional, Union
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateAccountError
from app.core.security import hasher
from app.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """
    Service class untuk user operations.
    Satu-satunya tempat yang membaca/menulis User record.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize user service.

        Args:
            db: Database session
        """
        self.db = db

    async def create_user(self, name: str, email: str, password: str) -> User:
        """
        Register user baru.

        Args:
            name: Display name
            email: User email
            password: Plain text password (sudah lolos policy panjang minimal)

        Returns:
            Created user object

        Raises:
            DuplicateAccountError: Jika email sudah terdaftar
        """
        email = email.lower().strip()
        name = name.strip()

        existing_user = await self.get_user_by_email(email)
        if existing_user:
            raise DuplicateAccountError()

        # Hashing CPU-bound, jangan blok event loop
        password_hash = await run_in_threadpool(hasher.hash, password)

        user = User(
            name=name,
            email=email,
            password_hash=password_hash
        )
        self.db.add(user)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # Race condition: email didaftarkan request lain di antara check dan insert
            raise DuplicateAccountError()

        logger.info(f"User registered: {user.id}")
        return user

    async def get_user_by_id(self, user_id: Union[UUID, str]) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User object atau None
        """
        if isinstance(user_id, str):
            try:
                user_id = UUID(user_id)
            except ValueError:
                return None

        result = await self.db.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email

        Returns:
            User object atau None
        """
        email = email.lower().strip()
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def update_password_hash(self, user: User, password_hash: str) -> None:
        """
        Simpan hash baru untuk user (dipakai saat parameter hashing di-upgrade).

        Args:
            user: User object
            password_hash: Hash baru
        """
        user.password_hash = password_hash
        await self.db.commit()
