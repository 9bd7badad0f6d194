"""
API dependencies module.
Berisi reusable dependencies untuk FastAPI endpoints.
"""

from app.api.dependencies.auth import AccessGuard, CurrentIdentity, access_guard
from app.api.dependencies.database import get_db

__all__ = [
    "AccessGuard",
    "CurrentIdentity",
    "access_guard",
    "get_db",
]
