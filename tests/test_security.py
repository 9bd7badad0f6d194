"""
Tests for security functionality.
"""

import base64
import json

import pytest
from datetime import datetime, timedelta, timezone
from jose import jwt

from app.core.security import CredentialHasher, TokenIssuer, TokenVerifier, hasher
from app.core.exceptions import (
    InvalidInputError,
    MisconfigurationError,
    MalformedTokenError,
    InvalidSignatureError,
    ExpiredTokenError,
    TokenError
)
from app.schemas.token import IdentityClaim


SECRET = "unit-test-signing-secret"
T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _b64(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


@pytest.fixture
def claim() -> IdentityClaim:
    return IdentityClaim(id="3f2b8c1e-0000-4000-8000-000000000001", email="john@example.com")


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(algorithm="HS256", default_ttl=timedelta(hours=1))


@pytest.fixture
def verifier() -> TokenVerifier:
    return TokenVerifier(algorithm="HS256")


@pytest.mark.unit
@pytest.mark.security
class TestCredentialHasher:
    """Test password hashing functionality."""

    def test_hash_password(self):
        """Test password hashing."""
        password = "123456"
        hashed = hasher.hash(password)

        assert hashed != password
        assert password not in hashed
        assert hashed.startswith("$argon2")
        assert len(hashed) > 50

    def test_hash_embeds_work_factor(self):
        hashed = CredentialHasher(rounds=12, memory_cost=8192).hash("123456")

        assert "t=12" in hashed
        assert "m=8192" in hashed

    def test_verify_password_correct(self):
        hashed = hasher.hash("123456")

        assert hasher.verify("123456", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hasher.hash("123456")

        assert hasher.verify("1234567", hashed) is False
        assert hasher.verify("", hashed) is False

    def test_hash_is_salted(self):
        """Same password menghasilkan hash berbeda, keduanya tetap valid."""
        first = hasher.hash("123456")
        second = hasher.hash("123456")

        assert first != second
        assert hasher.verify("123456", first) is True
        assert hasher.verify("123456", second) is True

    def test_hash_unicode_password(self):
        hashed = hasher.hash("kata-sandi-ñ-密码")

        assert hasher.verify("kata-sandi-ñ-密码", hashed) is True

    @pytest.mark.parametrize("plaintext", ["", None, 123456, b"123456"])
    def test_hash_rejects_invalid_plaintext(self, plaintext):
        with pytest.raises(InvalidInputError):
            hasher.hash(plaintext)

    @pytest.mark.parametrize("credential_hash", [
        "",
        "not-a-hash",
        "$argon2id$v=19$garbage",
        None,
    ])
    def test_verify_rejects_malformed_hash(self, credential_hash):
        with pytest.raises(InvalidInputError):
            hasher.verify("123456", credential_hash)

    def test_verify_rejects_non_string_plaintext(self):
        hashed = hasher.hash("123456")

        with pytest.raises(InvalidInputError):
            hasher.verify(None, hashed)

    def test_needs_rehash_for_weaker_parameters(self):
        weak = CredentialHasher(rounds=10, memory_cost=4096)
        strong = CredentialHasher(rounds=12, memory_cost=4096)
        weak_hash = weak.hash("123456")

        assert strong.needs_rehash(weak_hash) is True
        assert weak.needs_rehash(weak_hash) is False
        # Hash lama tetap bisa diverifikasi setelah parameter dinaikkan
        assert strong.verify("123456", weak_hash) is True

    def test_needs_rehash_current_parameters(self):
        assert hasher.needs_rehash(hasher.hash("123456")) is False


@pytest.mark.unit
@pytest.mark.security
class TestTokenIssuer:
    """Test session token issuance."""

    def test_issue_token(self, issuer, claim):
        token = issuer.issue(claim, SECRET, now=T0)

        assert isinstance(token, str)
        assert token.count(".") == 2
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_payload_contains_claim_and_timestamps(self, issuer, claim):
        token = issuer.issue(claim, SECRET, now=T0)
        payload = jwt.get_unverified_claims(token)

        assert set(payload) == {"id", "email", "iat", "exp"}
        assert payload["id"] == claim.id
        assert payload["email"] == claim.email
        assert payload["iat"] == int(T0.timestamp())
        assert payload["exp"] - payload["iat"] == 3600

    def test_custom_ttl(self, issuer, claim):
        token = issuer.issue(claim, SECRET, ttl=timedelta(minutes=5), now=T0)
        payload = jwt.get_unverified_claims(token)

        assert payload["exp"] - payload["iat"] == 300

    def test_different_issue_time_different_token(self, issuer, claim):
        first = issuer.issue(claim, SECRET, now=T0)
        second = issuer.issue(claim, SECRET, now=T0 + timedelta(seconds=1))

        assert first != second

    def test_empty_secret(self, issuer, claim):
        with pytest.raises(MisconfigurationError):
            issuer.issue(claim, "", now=T0)


@pytest.mark.unit
@pytest.mark.security
class TestTokenVerifier:
    """Test session token validation."""

    def test_round_trip(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET, now=T0)

        assert verifier.verify(token, SECRET, now=T0 + timedelta(minutes=30)) == claim

    def test_bytes_secret(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET.encode(), now=T0)

        assert verifier.verify(token, SECRET.encode(), now=T0) == claim

    def test_expired_token(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET, ttl=timedelta(minutes=1), now=T0)

        assert verifier.verify(token, SECRET, now=T0 + timedelta(seconds=30)) == claim
        with pytest.raises(ExpiredTokenError):
            verifier.verify(token, SECRET, now=T0 + timedelta(minutes=2))

    def test_expired_at_exact_expiry(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET, ttl=timedelta(minutes=1), now=T0)

        with pytest.raises(ExpiredTokenError):
            verifier.verify(token, SECRET, now=T0 + timedelta(minutes=1))

    def test_wrong_secret(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET, now=T0)

        with pytest.raises(InvalidSignatureError):
            verifier.verify(token, "another-secret", now=T0)

    def test_tampered_payload(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET, now=T0)
        header, _, signature = token.split(".")
        forged_payload = _b64({
            "id": claim.id,
            "email": "attacker@example.com",
            "iat": int(T0.timestamp()),
            "exp": int((T0 + timedelta(hours=1)).timestamp())
        })

        with pytest.raises(InvalidSignatureError):
            verifier.verify(f"{header}.{forged_payload}.{signature}", SECRET, now=T0)

    def test_none_algorithm_rejected(self, verifier, claim):
        header = _b64({"alg": "none", "typ": "JWT"})
        payload = _b64({
            "id": claim.id,
            "email": claim.email,
            "iat": int(T0.timestamp()),
            "exp": int((T0 + timedelta(hours=1)).timestamp())
        })

        with pytest.raises(InvalidSignatureError):
            verifier.verify(f"{header}.{payload}.", SECRET, now=T0)

    @pytest.mark.parametrize("token", [
        "",
        "abc",
        "a.b",
        "a.b.c.d",
        "!!!.###.$$$",
        None,
    ])
    def test_malformed_token(self, verifier, token):
        with pytest.raises(MalformedTokenError):
            verifier.verify(token, SECRET, now=T0)

    def test_missing_identity_field(self, verifier):
        token = jwt.encode(
            {"id": "user-1", "exp": int((T0 + timedelta(hours=1)).timestamp())},
            SECRET,
            algorithm="HS256"
        )

        with pytest.raises(MalformedTokenError):
            verifier.verify(token, SECRET, now=T0)

    def test_non_numeric_expiry(self, verifier, claim):
        token = jwt.encode(
            {"id": claim.id, "email": claim.email, "exp": "tomorrow"},
            SECRET,
            algorithm="HS256"
        )

        with pytest.raises(MalformedTokenError):
            verifier.verify(token, SECRET, now=T0)

    def test_all_failures_are_token_errors(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET, ttl=timedelta(minutes=1), now=T0)

        for bad_token, secret, now in [
            ("abc", SECRET, T0),
            (token, "another-secret", T0),
            (token, SECRET, T0 + timedelta(hours=1)),
        ]:
            with pytest.raises(TokenError) as exc_info:
                verifier.verify(bad_token, secret, now=now)
            assert exc_info.value.status_code == 401

    def test_empty_secret(self, issuer, verifier, claim):
        token = issuer.issue(claim, SECRET, now=T0)

        with pytest.raises(MisconfigurationError):
            verifier.verify(token, "", now=T0)
