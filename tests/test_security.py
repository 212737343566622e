"""Tests for password hashing, authentication and token issuance."""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest

from board.exceptions import LoginFailureError
from board.models import RoleType
from board.server.security import (
    Authentication,
    AuthenticationManager,
    JWTVerificationError,
    PasswordHasher,
    PrivateClaims,
    TokenService,
)

from factories import TEST_SECRET_KEY, create_member, create_role


def test_password_hasher_round_trip():
    hasher = PasswordHasher(["pbkdf2_sha256"])

    hashed = hasher.hash("Pw12345!")

    assert hashed != "Pw12345!"
    assert hasher.verify("Pw12345!", hashed)
    assert not hasher.verify("Other1!", hashed)


def test_password_hasher_rejects_unknown_hash_format():
    hasher = PasswordHasher(["pbkdf2_sha256"])

    assert hasher.verify("Pw12345!", "not-a-hash") is False


def test_token_embeds_private_claims(test_token_service):
    """발급된 토큰에 회원 id와 권한 목록이 포함되는지 테스트.
    
    Given: 인증된 주체와 private claims가 있고
    When: access token을 발급하면
    Then: 토큰을 검증했을 때 sub, memberId, roleTypes, auth가 그대로 복원되어야 함
    """
    authentication = Authentication(name="alice", authorities=["USER", "ADMIN"])
    claims = PrivateClaims(member_id="1", role_types=["USER", "ADMIN"])
    
    token = test_token_service.create_access_token(authentication, claims)
    payload = test_token_service.parse_access_token(token)
    
    assert token
    assert payload["sub"] == "alice"
    assert payload["memberId"] == "1"
    assert payload["roleTypes"] == ["USER", "ADMIN"]
    assert payload["auth"] == "USER,ADMIN"
    assert payload["exp"] > payload["iat"]


def test_token_signed_with_other_key_is_rejected(test_token_service):
    other = TokenService(secret_key="another-secret-key-that-is-also-long-enough", algorithm="HS256")
    token = other.create_access_token(Authentication(name="alice"), PrivateClaims(member_id="1"))

    with pytest.raises(JWTVerificationError):
        test_token_service.parse_access_token(token)


def test_expired_token_is_rejected(test_token_service):
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {"sub": "alice", "iat": past, "exp": past + timedelta(minutes=5)},
        TEST_SECRET_KEY,
        algorithm="HS256",
    )

    with pytest.raises(JWTVerificationError):
        test_token_service.parse_access_token(token)


def test_issuer_is_enforced_when_configured():
    issuing = TokenService(secret_key=TEST_SECRET_KEY, algorithm="HS256", issuer="board")
    foreign = TokenService(secret_key=TEST_SECRET_KEY, algorithm="HS256", issuer="someone-else")
    token = foreign.create_access_token(Authentication(name="alice"), PrivateClaims(member_id="1"))

    with pytest.raises(JWTVerificationError):
        issuing.parse_access_token(token)


def test_signing_failure_returns_empty_token():
    """서명에 실패하면 예외 대신 빈 문자열을 반환하는지 테스트."""
    service = TokenService(secret_key=TEST_SECRET_KEY, algorithm="NOT-AN-ALGORITHM")
    
    token = service.create_access_token(Authentication(name="alice"), PrivateClaims(member_id="1"))
    
    assert token == ""


@pytest.mark.asyncio
async def test_authentication_manager_accepts_valid_credentials():
    hasher = PasswordHasher(["pbkdf2_sha256"])
    member = create_member(
        username="alice",
        password=hasher.hash("Pw12345!"),
        member_id=1,
        roles=[create_role(RoleType.USER, 1)],
    )
    repo = MagicMock()
    repo.find_one_with_roles_by_username = AsyncMock(return_value=member)

    authentication = await AuthenticationManager(repo, hasher).authenticate("alice", "Pw12345!")

    assert authentication == Authentication(name="alice", authorities=["USER"])
    repo.find_one_with_roles_by_username.assert_awaited_once_with("alice")


@pytest.mark.asyncio
@pytest.mark.parametrize("stored_member", [True, False])
async def test_authentication_manager_rejects_bad_credentials(stored_member):
    hasher = PasswordHasher(["pbkdf2_sha256"])
    repo = MagicMock()
    repo.find_one_with_roles_by_username = AsyncMock(
        return_value=create_member(password=hasher.hash("Pw12345!")) if stored_member else None
    )

    with pytest.raises(LoginFailureError):
        await AuthenticationManager(repo, hasher).authenticate("user", "wrong-password")
