"""Dependency injection for FastAPI routes.

요청마다 하나의 DB 세션을 열고, 그 세션을 공유하는 저장소/서비스를
생성자 주입으로 조립합니다.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from board.models.member import Member
from board.repositories.member_repo import MemberRepository
from board.repositories.role_repo import RoleRepository
from board.server.db import get_db
from board.server.security import (
    AuthenticationManager,
    JWTVerificationError,
    PasswordHasher,
    TokenService,
)
from board.services.member_service import MemberService
from board.services.sign_service import SignService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache
def get_token_service() -> TokenService:
    return TokenService()


def get_member_repo(session: AsyncSession = Depends(get_db)) -> MemberRepository:
    return MemberRepository(session)


def get_role_repo(session: AsyncSession = Depends(get_db)) -> RoleRepository:
    return RoleRepository(session)


def get_sign_service(
    member_repo: MemberRepository = Depends(get_member_repo),
    role_repo: RoleRepository = Depends(get_role_repo),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> SignService:
    return SignService(
        member_repo=member_repo,
        role_repo=role_repo,
        password_hasher=password_hasher,
        authentication_manager=AuthenticationManager(member_repo, password_hasher),
        token_service=token_service,
    )


def get_member_service(
    member_repo: MemberRepository = Depends(get_member_repo),
) -> MemberService:
    return MemberService(member_repo)


async def get_current_member(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    token_service: TokenService = Depends(get_token_service),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> Member:
    """Bearer 토큰으로 현재 회원을 인증하고 조회합니다.

    Raises:
        HTTPException: 401 - 토큰이 없거나 유효하지 않음, 또는 회원이 없음
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = token_service.parse_access_token(credentials.credentials)
    except JWTVerificationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    member_id = payload.get("memberId")
    member = None
    if member_id is not None and str(member_id).isdigit():
        member = await member_repo.find_by_id(int(member_id))

    if member is None:
        logger.warning("Token subject no longer exists: %s", payload.get("sub"))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return member
