"""
Authentication dependencies untuk FastAPI.
Access Guard: satu-satunya titik di mana request masuk diautentikasi.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings
from app.core.exceptions import AuthenticationRejected, RejectionReason, TokenError
from app.core.security import TokenVerifier, Secret, token_verifier
from app.schemas.token import IdentityClaim

logger = logging.getLogger("userauth.security")

BEARER_PREFIX = "Bearer "

# Hanya untuk OpenAPI (tombol Authorize di Swagger UI); header tetap diparse oleh AccessGuard
bearer_scheme = HTTPBearer(scheme_name="BearerAuth", auto_error=False)


class AccessGuard:
    """
    Dependency class yang menjaga protected routes.

    Membaca header Authorization, memverifikasi bearer token dan
    menempelkan identity claim ke request.state. Semua kegagalan
    verifikasi dipetakan ke satu Rejection generik.
    """

    def __init__(
        self,
        verifier: TokenVerifier = token_verifier,
        secret: Optional[Secret] = None
    ):
        """
        Args:
            verifier: Token verifier
            secret: Signing secret (default: settings.SECRET_KEY)
        """
        self.verifier = verifier
        self._secret = secret

    @property
    def secret(self) -> Secret:
        return self._secret if self._secret is not None else settings.SECRET_KEY

    def extract_token(self, authorization: Optional[str]) -> str:
        """
        Ambil token dari nilai header Authorization.

        Raises:
            AuthenticationRejected: Jika header tidak ada atau bukan skema Bearer
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise AuthenticationRejected(RejectionReason.NO_TOKEN)

        token = authorization[len(BEARER_PREFIX):].strip()
        if not token:
            raise AuthenticationRejected(RejectionReason.NO_TOKEN)
        return token

    def authorize(self, request: Request) -> IdentityClaim:
        """
        Autentikasi request.

        Args:
            request: Incoming request

        Returns:
            Identity claim caller

        Raises:
            AuthenticationRejected: NO_TOKEN atau INVALID_TOKEN
        """
        token = self.extract_token(request.headers.get("Authorization"))

        try:
            claim = self.verifier.verify(token, self.secret)
        except TokenError as e:
            # Detail hanya untuk log server, tidak untuk client
            logger.info(f"Token rejected on {request.url.path}: {e.error_code}")
            raise AuthenticationRejected(RejectionReason.INVALID_TOKEN) from e

        request.state.identity = claim
        request.state.user_id = claim.id
        return claim

    async def __call__(
        self,
        request: Request,
        credentials: Annotated[
            Optional[HTTPAuthorizationCredentials], Security(bearer_scheme)
        ]
    ) -> IdentityClaim:
        return self.authorize(request)


access_guard = AccessGuard()

CurrentIdentity = Annotated[IdentityClaim, Depends(access_guard)]
