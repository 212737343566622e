"""Member sign-up and login.

회원 가입(중복 검사 → 기본 권한 조회 → 비밀번호 해시 → 저장)과
로그인(회원 조회 → 자격 증명 검증 → claims 구성 → 토큰 발급)을 담당합니다.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from board.exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    LoginFailureError,
    MemberNotFoundError,
    RoleNotFoundError,
)
from board.models.member import Member
from board.models.role import RoleType
from board.repositories.member_repo import MemberRepository
from board.repositories.role_repo import RoleRepository
from board.server.schemas import LoginRequest, LoginResponse, SignUpRequest
from board.server.security import (
    AuthenticationManager,
    PasswordHasher,
    PrivateClaims,
    TokenService,
)

logger = logging.getLogger(__name__)


class SignService:
    """Orchestrates member sign-up and login."""

    def __init__(
        self,
        member_repo: MemberRepository,
        role_repo: RoleRepository,
        password_hasher: PasswordHasher,
        authentication_manager: AuthenticationManager,
        token_service: TokenService,
    ) -> None:
        self.member_repo = member_repo
        self.role_repo = role_repo
        self.password_hasher = password_hasher
        self.authentication_manager = authentication_manager
        self.token_service = token_service

    async def sign_up(self, request: SignUpRequest) -> None:
        """Register a new member with the default USER role.

        Raises:
            DuplicateUsernameError: 이미 등록된 아이디
            DuplicateEmailError: 이미 등록된 이메일
            RoleNotFoundError: USER 권한이 DB에 없음 (시드 데이터 누락)
        """
        await self._validate_duplicate_sign_up_info(request)

        role = await self.role_repo.find_by_role_type(RoleType.USER)
        if role is None:
            logger.error("Default role %s is missing from the role store", RoleType.USER.value)
            raise RoleNotFoundError()

        member = Member(
            request.username,
            self.password_hasher.hash(request.password),
            request.nickname,
            request.email,
            [role],
        )
        try:
            await self.member_repo.save(member)
        except IntegrityError as exc:
            # 동시 가입으로 unique 제약 조건에 걸린 경우
            if await self.member_repo.exists_by_username(request.username):
                raise DuplicateUsernameError() from exc
            raise DuplicateEmailError() from exc

        logger.info("Member signed up: username=%s", request.username)

    async def login(self, request: LoginRequest) -> LoginResponse:
        """Verify credentials and issue an access token.

        Raises:
            MemberNotFoundError: 존재하지 않는 아이디
            LoginFailureError: 비밀번호 불일치 또는 토큰 발급 실패
        """
        member = await self.member_repo.find_by_username(request.username)
        if member is None:
            logger.warning("Login attempt for unknown username=%s", request.username)
            raise MemberNotFoundError()

        private_claims = self._create_private_claims(member)
        token = await self._jwt_login_request(request, private_claims)
        logger.info("Member logged in: username=%s", request.username)
        return LoginResponse.to_dto(token)

    @staticmethod
    def _create_private_claims(member: Member) -> PrivateClaims:
        return PrivateClaims(
            member_id=str(member.id),
            role_types=[member_role.role.role_type.value for member_role in member.roles],
        )

    async def _jwt_login_request(self, request: LoginRequest, private_claims: PrivateClaims) -> str:
        authentication = await self.authentication_manager.authenticate(
            request.username, request.password
        )

        token = self.token_service.create_access_token(authentication, private_claims)
        if not token:
            raise LoginFailureError()
        return token

    async def _validate_duplicate_sign_up_info(self, request: SignUpRequest) -> None:
        member = await self.member_repo.find_one_with_roles_by_username(request.username)
        if member is not None:
            logger.warning("Sign-up rejected, username taken: %s", request.username)
            raise DuplicateUsernameError()
        if await self.member_repo.exists_by_email(request.email):
            logger.warning("Sign-up rejected, email taken: %s", request.email)
            raise DuplicateEmailError()
