"""
Authentication endpoints untuk API v1.
Menangani login dan issuance session token.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies.database import get_db
from app.core.constants import ResponseMessage
from app.core.exceptions import UserAuthException
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.user import UserResponse
from app.services.auth import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db)
) -> LoginResponse:
    """
    Login dengan email dan password.

    Args:
        credentials: Email dan password
        db: Database session

    Returns:
        LoginResponse dengan session token dan data public user

    Raises:
        BadCredentialsError: Email tidak terdaftar atau password salah (400)
    """
    auth_service = AuthService(db)

    try:
        result = await auth_service.authenticate_user(
            email=credentials.email,
            password=credentials.password
        )
    except UserAuthException:
        raise
    except Exception as e:
        logger.error(f"Error logging in: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ResponseMessage.LOGIN_FAILED
        )

    return LoginResponse(
        token=result["token"],
        token_type="bearer",
        expires_in=result["expires_in"],
        user=UserResponse.from_user(result["user"])
    )
