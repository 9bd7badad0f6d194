"""
UserAuth API - User registration and bearer-token authentication API.

This package provides:
- User registration with Argon2 password hashing
- Login with signed, time-bounded session tokens (JWT HS256)
- Access Guard for protected endpoints

Built with FastAPI, SQLAlchemy, and PostgreSQL.
"""

__version__ = "1.0.0"
__author__ = "UserAuth Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__author__",
    "__license__",
]
