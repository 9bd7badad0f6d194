"""
API module untuk UserAuth API.
Berisi endpoints dan dependencies untuk API.
"""

from app.api.v1 import auth, users, health

__all__ = ["auth", "users", "health"]
