"""
Models module untuk UserAuth API.
Berisi semua SQLAlchemy models untuk database.
"""

from app.models.user import User

__all__ = [
    "User",
]
