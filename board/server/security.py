"""Security utilities: password hashing, authentication and JWT issuance.

구성 요소:
- PasswordHasher: passlib CryptContext 기반 단방향 해시/검증
- AuthenticationManager: username/password 자격 증명 검증
- TokenService: 검증된 인증 정보 + private claims로 access token 발급/검증
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import jwt
from jwt import InvalidTokenError, PyJWTError
from passlib.context import CryptContext

from board.exceptions import LoginFailureError
from board.repositories.member_repo import MemberRepository
from board.server.settings import settings

logger = logging.getLogger(__name__)


class JWTVerificationError(Exception):
    """Raised when a JWT cannot be verified."""


class PasswordHasher:
    """One-way password hashing backed by passlib."""

    def __init__(self, schemes: Optional[List[str]] = None) -> None:
        if schemes is None:
            schemes = [s.strip() for s in settings.PASSWORD_HASH_SCHEMES.split(",") if s.strip()]
        self._context = CryptContext(schemes=schemes or ["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            # 알 수 없는 해시 형식
            return False


@dataclass(frozen=True)
class Authentication:
    """자격 증명 검증에 성공한 주체."""
    name: str
    authorities: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PrivateClaims:
    """토큰에 포함되는 회원 식별자와 권한 목록 (저장되지 않음)."""
    member_id: str
    role_types: List[str] = field(default_factory=list)


class AuthenticationManager:
    """username/password 자격 증명을 검증합니다.

    SignService와 독립적으로 회원을 다시 조회하고, 같은 PasswordHasher로
    비밀번호를 검증합니다.
    """

    def __init__(self, member_repo: MemberRepository, password_hasher: PasswordHasher) -> None:
        self.member_repo = member_repo
        self.password_hasher = password_hasher

    async def authenticate(self, username: str, password: str) -> Authentication:
        """Verify credentials.

        Raises:
            LoginFailureError: 회원이 없거나 비밀번호가 일치하지 않음
        """
        member = await self.member_repo.find_one_with_roles_by_username(username)
        if member is None or not self.password_hasher.verify(password, member.password):
            logger.warning("Bad credentials for username=%s", username)
            raise LoginFailureError()
        return Authentication(name=member.username, authorities=member.role_types)


class TokenService:
    """Signs and parses access tokens (PyJWT)."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
        issuer: Optional[str] = None,
    ) -> None:
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.expire_minutes = expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
        self.issuer = issuer if issuer is not None else settings.JWT_ISSUER

    def create_access_token(self, authentication: Authentication, claims: PrivateClaims) -> str:
        """Create a signed access token.

        Returns:
            인코딩된 JWT. 서명에 실패하면 빈 문자열
        """
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": authentication.name,
            "auth": ",".join(authentication.authorities),
            "memberId": claims.member_id,
            "roleTypes": list(claims.role_types),
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        if self.issuer:
            payload["iss"] = self.issuer

        try:
            return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        except (PyJWTError, NotImplementedError) as exc:
            logger.error("Failed to sign access token for %s: %s", authentication.name, exc)
            return ""

    def parse_access_token(self, token: str) -> Dict[str, Any]:
        """Verify a token issued by this service and return its payload.

        Raises:
            JWTVerificationError: 서명/만료/발급자 검증 실패
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={
                    "require": ["exp", "sub"],
                    "verify_iss": self.issuer is not None,
                },
            )
        except InvalidTokenError as exc:
            logger.warning("JWT verification failed: %s", exc)
            raise JWTVerificationError(str(exc)) from exc
