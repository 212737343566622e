"""Role repository backed by the relational store."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.models.role import Role, RoleType

logger = logging.getLogger(__name__)


class RoleRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_role_type(self, role_type: RoleType) -> Optional[Role]:
        result = await self.session.execute(select(Role).where(Role.role_type == role_type))
        return result.scalar_one_or_none()

    async def _existing_role_types(self) -> Set[RoleType]:
        return set((await self.session.scalars(select(Role.role_type))).all())

    async def ensure_roles(self, role_types: Iterable[RoleType]) -> List[Role]:
        """누락된 RoleType 행을 생성합니다 (시드 데이터).

        같은 DB를 쓰는 다른 인스턴스가 먼저 생성한 권한은 건너뜁니다.

        Returns:
            새로 생성된 Role 목록
        """
        existing = await self._existing_role_types()
        created = []
        for role_type in role_types:
            if role_type in existing:
                continue
            role = Role(role_type)
            self.session.add(role)
            try:
                await self.session.commit()
            except IntegrityError:
                await self.session.rollback()
                logger.info("Role %s was created concurrently; skipping", role_type.value)
                continue
            created.append(role)
        if created:
            logger.debug("Created %d role rows", len(created))
        return created
