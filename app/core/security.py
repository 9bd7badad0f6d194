"""
Modul keamanan terpusat untuk UserAuth API.
Menangani password hashing/verification serta issuance dan validasi session token.

Semua komponen di sini stateless: signing secret selalu dikirim eksplisit
oleh caller, tidak dibaca dari global state di dalam operasi.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from jose import jwt, JWTError
from jose.exceptions import JWTClaimsError
from passlib.context import CryptContext
from pydantic import ValidationError as SchemaValidationError

from app.core.config import settings
from app.core.exceptions import (
    InvalidInputError,
    MisconfigurationError,
    MalformedTokenError,
    InvalidSignatureError,
    ExpiredTokenError
)
from app.schemas.token import IdentityClaim

logger = logging.getLogger("userauth.security")

Secret = Union[str, bytes]

# Claims yang ditambahkan issuer di luar identity claim
RESERVED_CLAIMS = ("iat", "exp")


def _require_secret(secret: Optional[Secret]) -> Secret:
    if not secret:
        logger.error("Signing secret is not configured")
        raise MisconfigurationError("Signing secret is not configured")
    return secret


class CredentialHasher:
    """
    One-way password hashing dengan Argon2.

    Hash yang dihasilkan self-describing: versi, memory cost, work factor,
    parallelism dan salt ikut tersimpan di string hash, sehingga parameter
    bisa dinaikkan tanpa merusak hash lama.
    """

    def __init__(
        self,
        rounds: int = 10,
        memory_cost: int = 19456,
        parallelism: int = 1
    ):
        """
        Args:
            rounds: Argon2 time cost (work factor)
            memory_cost: Argon2 memory cost dalam KiB
            parallelism: Argon2 parallelism
        """
        self.rounds = rounds
        self.memory_cost = memory_cost
        self.parallelism = parallelism
        self._context = CryptContext(
            schemes=["argon2"],
            deprecated="auto",
            argon2__rounds=rounds,
            argon2__min_rounds=rounds,
            argon2__memory_cost=memory_cost,
            argon2__parallelism=parallelism,
            argon2__hash_len=32,
            argon2__salt_len=16
        )

    def hash(self, plaintext: str) -> str:
        """
        Hash password menggunakan Argon2 dengan salt random per panggilan.

        Args:
            plaintext: Plain text password

        Returns:
            Hashed password

        Raises:
            InvalidInputError: Jika password bukan string atau kosong
        """
        if not isinstance(plaintext, str) or not plaintext:
            raise InvalidInputError("Password must be a non-empty string")
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, credential_hash: str) -> bool:
        """
        Verifikasi password terhadap hash.
        Perbandingan digest dilakukan constant-time oleh backend Argon2.

        Args:
            plaintext: Plain text password
            credential_hash: Hash yang tersimpan

        Returns:
            True jika password cocok, False jika tidak

        Raises:
            InvalidInputError: Jika hash tidak dikenali atau rusak
        """
        if not isinstance(plaintext, str):
            raise InvalidInputError("Password must be a string")
        if not isinstance(credential_hash, str) or not credential_hash:
            raise InvalidInputError("Credential hash must be a non-empty string")

        try:
            return self._context.verify(plaintext, credential_hash)
        except (ValueError, TypeError) as e:
            raise InvalidInputError("Malformed credential hash") from e

    def needs_rehash(self, credential_hash: str) -> bool:
        """
        Check apakah hash dibuat dengan parameter yang lebih lemah dari konfigurasi saat ini.

        Args:
            credential_hash: Hash yang tersimpan

        Returns:
            True jika hash perlu di-upgrade
        """
        try:
            return self._context.needs_update(credential_hash)
        except (ValueError, TypeError) as e:
            raise InvalidInputError("Malformed credential hash") from e


class TokenIssuer:
    """Membuat session token (JWT HS256) yang ditandatangani dan time-bounded."""

    def __init__(self, algorithm: str = "HS256", default_ttl: timedelta = timedelta(hours=1)):
        self.algorithm = algorithm
        self.default_ttl = default_ttl

    def issue(
        self,
        claim: IdentityClaim,
        secret: Secret,
        ttl: Optional[timedelta] = None,
        now: Optional[datetime] = None
    ) -> str:
        """
        Membuat session token untuk identity claim.

        Args:
            claim: Identity claim user
            secret: Signing secret
            ttl: Masa berlaku token (default dari konfigurasi)
            now: Waktu issuance, untuk testing dengan simulated clock

        Returns:
            Encoded session token

        Raises:
            MisconfigurationError: Jika secret kosong
        """
        secret = _require_secret(secret)

        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + (ttl if ttl is not None else self.default_ttl)

        to_encode = claim.model_dump()
        to_encode.update({
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp())
        })

        return jwt.encode(to_encode, secret, algorithm=self.algorithm)


class TokenVerifier:
    """Validasi struktur, signature dan expiry session token."""

    def __init__(self, algorithm: str = "HS256"):
        self.algorithm = algorithm

    def verify(
        self,
        token: str,
        secret: Secret,
        now: Optional[datetime] = None
    ) -> IdentityClaim:
        """
        Decode dan validasi session token.

        Args:
            token: Session token
            secret: Signing secret
            now: Waktu saat ini, untuk testing dengan simulated clock

        Returns:
            Identity claim yang di-embed di token

        Raises:
            MalformedTokenError: Jika token tidak bisa di-parse
            InvalidSignatureError: Jika signature tidak cocok
            ExpiredTokenError: Jika token sudah expired
            MisconfigurationError: Jika secret kosong
        """
        secret = _require_secret(secret)

        if not isinstance(token, str) or token.count(".") != 2:
            raise MalformedTokenError()

        try:
            header = jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise MalformedTokenError() from e

        # Token dengan algoritma lain (termasuk "none") diperlakukan sebagai forgery
        if header.get("alg") != self.algorithm:
            raise InvalidSignatureError()

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False}
            )
        except JWTClaimsError as e:
            raise MalformedTokenError() from e
        except JWTError as e:
            raise InvalidSignatureError() from e

        expires_at = payload.get("exp")
        if isinstance(expires_at, bool) or not isinstance(expires_at, int):
            raise MalformedTokenError()

        current_time = now or datetime.now(timezone.utc)
        if current_time.timestamp() >= expires_at:
            raise ExpiredTokenError()

        claim_fields = {
            key: value for key, value in payload.items()
            if key not in RESERVED_CLAIMS
        }
        try:
            return IdentityClaim.model_validate(claim_fields)
        except SchemaValidationError as e:
            raise MalformedTokenError() from e


# Global instances, dikonfigurasi sekali saat startup
hasher = CredentialHasher(
    rounds=settings.PASSWORD_HASH_ROUNDS,
    memory_cost=settings.PASSWORD_HASH_MEMORY_COST,
    parallelism=settings.PASSWORD_HASH_PARALLELISM
)
token_issuer = TokenIssuer(
    algorithm=settings.ALGORITHM,
    default_ttl=settings.access_token_expire_timedelta
)
token_verifier = TokenVerifier(algorithm=settings.ALGORITHM)
