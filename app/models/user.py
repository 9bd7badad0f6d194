"""
User model untuk UserAuth API.
Model utama yang merepresentasikan user account dalam sistem.
"""

from typing import Any, Dict

from sqlalchemy import Column, String, UniqueConstraint, CheckConstraint

from app.db.base import BaseModel
from app.schemas.token import IdentityClaim


class User(BaseModel):
    """
    User account.

    Attributes:
        id: Unique user ID (UUID)
        name: Display name
        email: User's email address (unique, lower case)
        password_hash: Self-describing Argon2 hash, tidak pernah plaintext
        created_at: Account creation timestamp
        updated_at: Last update timestamp
    """

    __tablename__ = "users"

    name = Column(
        String(100),
        nullable=False
    )
    email = Column(
        String(255),
        nullable=False,
        index=True
    )
    password_hash = Column(
        String(255),
        nullable=False
    )

    __table_args__ = (
        UniqueConstraint('email', name='uq_users_email'),
        CheckConstraint('length(email) >= 3', name='ck_users_email_length'),
    )

    def identity_claim(self) -> IdentityClaim:
        """Identity claim minimal untuk session token."""
        return IdentityClaim(id=str(self.id), email=self.email)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert user to public dictionary.
        Password hash tidak pernah ikut.
        """
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
