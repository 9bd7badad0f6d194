"""
Security headers middleware untuk UserAuth API.
Menambahkan security headers untuk melindungi aplikasi dari common attacks.
"""

from typing import Callable, Optional, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware untuk menambahkan security headers ke semua response.

    Headers yang ditambahkan:
    - X-Content-Type-Options: nosniff
    - X-Frame-Options: DENY
    - Referrer-Policy
    - Cross-Origin-Opener-Policy
    - Strict-Transport-Security (untuk HTTPS)
    - Content-Security-Policy
    """

    def __init__(
        self,
        app: ASGIApp,
        enable_hsts: bool = True,
        enable_csp: bool = True,
        csp_directives: Optional[Dict[str, str]] = None
    ):
        """
        Initialize security headers middleware.

        Args:
            app: FastAPI/Starlette application
            enable_hsts: Enable Strict-Transport-Security header
            enable_csp: Enable Content-Security-Policy header
            csp_directives: Custom CSP directives
        """
        super().__init__(app)
        self.enable_hsts = enable_hsts
        self.enable_csp = enable_csp
        self.csp_directives = csp_directives or {
            "default-src": "'self'",
            # Swagger UI di /api-docs memuat asset dari CDN
            "script-src": "'self' 'unsafe-inline' https://cdn.jsdelivr.net",
            "style-src": "'self' 'unsafe-inline' https://cdn.jsdelivr.net",
            "img-src": "'self' data: https:",
            "object-src": "'none'",
            "frame-ancestors": "'none'",
            "base-uri": "'self'",
            "form-action": "'self'"
        }

    def build_csp_header(self) -> str:
        """Build Content-Security-Policy header value."""
        return "; ".join(
            f"{directive} {value}" if value else directive
            for directive, value in self.csp_directives.items()
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add security headers to response.

        Args:
            request: Incoming request
            call_next: Next middleware/endpoint

        Returns:
            Response with security headers
        """
        response = await call_next(request)

        headers = {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "no-referrer",
            "Cross-Origin-Opener-Policy": "same-origin",
        }

        if self.enable_hsts and request.url.scheme == "https":
            headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        if self.enable_csp:
            headers["Content-Security-Policy"] = self.build_csp_header()

        for header, value in headers.items():
            response.headers[header] = value

        if "server" in response.headers:
            del response.headers["server"]

        return response
