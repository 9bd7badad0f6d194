"""
User management endpoints untuk API v1.
Menangani registrasi dan profile user.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies.auth import CurrentIdentity
from app.api.dependencies.database import get_db
from app.core.constants import ResponseMessage
from app.core.exceptions import UserAuthException, NotFoundError
from app.schemas.response import MessageResponse
from app.schemas.user import UserCreate, UserResponse
from app.services.user import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
) -> MessageResponse:
    """
    Register new user account.

    Proses registrasi:
    1. Validasi input data (schema)
    2. Check email uniqueness
    3. Hash password
    4. Simpan user

    Raises:
        DuplicateAccountError: Jika email sudah terdaftar (400)
    """
    user_service = UserService(db)

    try:
        await user_service.create_user(
            name=user_data.name,
            email=user_data.email,
            password=user_data.password
        )
    except UserAuthException:
        raise
    except Exception as e:
        logger.error(f"Error registering user: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ResponseMessage.REGISTER_FAILED
        )

    return MessageResponse(message=ResponseMessage.REGISTER_SUCCESS)


@router.get("/profile", response_model=UserResponse)
async def get_profile(
    identity: CurrentIdentity,
    db: AsyncSession = Depends(get_db)
) -> UserResponse:
    """
    Get profile user yang sedang login.
    Endpoint ini dilindungi Access Guard.

    Raises:
        NotFoundError: Jika user di balik token sudah tidak ada (404)
    """
    user_service = UserService(db)

    try:
        user = await user_service.get_user_by_id(identity.id)
    except Exception as e:
        logger.error(f"Error fetching profile: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ResponseMessage.PROFILE_FAILED
        )

    if user is None:
        raise NotFoundError(ResponseMessage.USER_NOT_FOUND)

    return UserResponse.from_user(user)
