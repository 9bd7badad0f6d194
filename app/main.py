"""
Main application entry point untuk UserAuth API.
Mengkonfigurasi FastAPI application dengan semua middleware, routers, dan handlers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.constants import ResponseMessage
from app.core.exceptions import UserAuthException, MisconfigurationError
from app.db.session import init_db, close_db
from app.api.v1 import auth, users, health
from app.middleware.security import SecurityHeadersMiddleware
from app.middleware.logging import LoggingMiddleware
from app.middleware.error_handler import ErrorHandlerMiddleware

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    if not settings.SECRET_KEY:
        logger.critical("SECRET_KEY is not set; refusing to start")
        raise MisconfigurationError("SECRET_KEY must be set")

    try:
        await init_db()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application")
    await close_db()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="User registration, login and bearer-token authentication API",
        version=settings.APP_VERSION,
        docs_url=settings.DOCS_URL,
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        # Token yang diisi lewat tombol Authorize tetap ada setelah reload
        swagger_ui_parameters={"persistAuthorization": True},
        lifespan=lifespan
    )

    # Add middleware (order matters - executed in reverse order)

    # 1. Error Handler (catches all exceptions)
    app.add_middleware(
        ErrorHandlerMiddleware,
        debug=settings.DEBUG
    )

    # 2. Logging
    app.add_middleware(
        LoggingMiddleware,
        log_request_body=settings.DEBUG,
        exclude_paths=[f"{settings.API_V1_STR}/health"]
    )

    # 3. Security Headers
    app.add_middleware(
        SecurityHeadersMiddleware,
        enable_hsts=not settings.DEBUG,
        enable_csp=True
    )

    # 4. CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Include API routers
    app.include_router(health.router, prefix=settings.API_V1_STR)
    app.include_router(auth.router, prefix=settings.API_V1_STR)
    app.include_router(users.router, prefix=settings.API_V1_STR)

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "operational",
            "docs": settings.DOCS_URL
        }

    @app.exception_handler(UserAuthException)
    async def user_auth_exception_handler(
        request: Request,
        exc: UserAuthException
    ) -> JSONResponse:
        """Handle UserAuthException."""
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}")
            message = ResponseMessage.INTERNAL_ERROR
        else:
            message = exc.message

        content = {
            "detail": message,
            "error_code": exc.error_code,
            "request_id": getattr(request.state, "request_id", None)
        }
        if exc.details and exc.status_code < 500:
            content["details"] = exc.details

        headers = None
        if exc.status_code == 401:
            headers = {"WWW-Authenticate": "Bearer"}

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=headers
        )

    return app


# Create application instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
