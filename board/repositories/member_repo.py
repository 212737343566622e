"""Member repository backed by the relational store."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from board.models.member import Member, MemberRole

logger = logging.getLogger(__name__)


class MemberRepository:
    """회원 조회/저장을 담당합니다. 요청 단위 AsyncSession을 공유합니다."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, member_id: int) -> Optional[Member]:
        return await self.session.get(Member, member_id)

    async def find_by_username(self, username: str) -> Optional[Member]:
        result = await self.session.execute(select(Member).where(Member.username == username))
        return result.scalar_one_or_none()

    async def find_one_with_roles_by_username(self, username: str) -> Optional[Member]:
        """username으로 회원을 조회하면서 권한(Role)까지 함께 로드합니다."""
        stmt = (
            select(Member)
            .where(Member.username == username)
            .options(selectinload(Member.roles).selectinload(MemberRole.role))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by_username(self, username: str) -> bool:
        return bool(await self.session.scalar(select(exists().where(Member.username == username))))

    async def exists_by_email(self, email: str) -> bool:
        return bool(await self.session.scalar(select(exists().where(Member.email == email))))

    async def save(self, member: Member) -> Member:
        """회원을 저장하고 커밋합니다.

        Raises:
            IntegrityError: unique 제약 조건 위반 (트랜잭션은 롤백된 상태)
        """
        self.session.add(member)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.warning("Integrity violation while saving member %s", member.username)
            raise
        return member
