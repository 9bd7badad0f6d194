"""
Global error handler middleware untuk UserAuth API.
Menangani semua unhandled exceptions dan mengubahnya menjadi response yang konsisten.
"""

from typing import Callable, Optional, Dict, Any
import traceback
import logging
from datetime import datetime, timezone

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.config import settings
from app.core.constants import ResponseMessage
from app.core.exceptions import UserAuthException


logger = logging.getLogger("userauth.error")


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handler middleware.

    Exceptions aplikasi (UserAuthException) dan HTTPException sudah
    ditangani oleh exception handlers FastAPI; middleware ini adalah
    jaring terakhir untuk error yang tidak terduga.
    """

    def __init__(
        self,
        app: ASGIApp,
        debug: Optional[bool] = None,
        log_errors: bool = True
    ):
        """
        Initialize error handler middleware.

        Args:
            app: FastAPI/Starlette application
            debug: Debug mode (shows stack traces)
            log_errors: Whether to log errors
        """
        super().__init__(app)
        self.debug = debug if debug is not None else settings.DEBUG
        self.log_errors = log_errors

    def create_error_response(
        self,
        request: Request,
        status_code: int,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        stack_trace: Optional[str] = None
    ) -> JSONResponse:
        """
        Create standardized error response.

        Args:
            request: Request object
            status_code: HTTP status code
            message: Error message
            error_code: Machine-readable error code
            details: Additional error details
            stack_trace: Stack trace (only in debug mode)

        Returns:
            JSON error response
        """
        content = {
            "detail": message,
            "error_code": error_code,
            "request_id": getattr(request.state, "request_id", None),
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

        if details:
            content["details"] = details

        if self.debug:
            debug_info = {
                "path": request.url.path,
                "method": request.method
            }
            if stack_trace:
                debug_info["stack_trace"] = stack_trace.split("\n")
            content["debug"] = debug_info

        return JSONResponse(
            status_code=status_code,
            content=content,
            headers={
                "X-Content-Type-Options": "nosniff",
                "Cache-Control": "no-store"
            }
        )

    def log_error(self, request: Request, error: Exception, status_code: int) -> None:
        """
        Log error with context.

        Args:
            request: Request object
            error: Exception
            status_code: HTTP status code
        """
        if not self.log_errors:
            return

        log_entry = {
            "request_id": getattr(request.state, "request_id", "unknown"),
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "error_type": type(error).__name__,
            "error_message": str(error)
        }

        if status_code >= 500:
            logger.error(log_entry, exc_info=error)
        else:
            logger.warning(log_entry)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request dengan error handling.

        Args:
            request: Incoming request
            call_next: Next middleware/endpoint

        Returns:
            Response atau error response
        """
        try:
            return await call_next(request)
        except Exception as exc:
            return self.handle_exception(request, exc)

    def handle_exception(self, request: Request, exc: Exception) -> Response:
        """
        Handle exception yang lolos dari exception handlers.

        Args:
            request: Request object
            exc: Exception to handle

        Returns:
            Error response
        """
        stack_trace = traceback.format_exc() if self.debug else None

        if isinstance(exc, UserAuthException):
            self.log_error(request, exc, exc.status_code)

            # Server-side errors (mis. MisconfigurationError) tidak dibocorkan ke client
            if exc.status_code >= 500 and not self.debug:
                message = ResponseMessage.INTERNAL_ERROR
            else:
                message = exc.message

            return self.create_error_response(
                request=request,
                status_code=exc.status_code,
                message=message,
                error_code=exc.error_code,
                stack_trace=stack_trace
            )

        self.log_error(request, exc, 500)

        # Hide internal error details in production
        message = str(exc) if self.debug else ResponseMessage.INTERNAL_ERROR

        return self.create_error_response(
            request=request,
            status_code=500,
            message=message,
            error_code="INTERNAL_SERVER_ERROR",
            stack_trace=stack_trace
        )
