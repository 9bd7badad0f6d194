"""
Middleware package untuk UserAuth API.
Berisi middleware untuk security headers, logging, dan error handling.
"""

from app.middleware.security import SecurityHeadersMiddleware
from app.middleware.logging import LoggingMiddleware
from app.middleware.error_handler import ErrorHandlerMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
    "LoggingMiddleware",
    "ErrorHandlerMiddleware",
]
