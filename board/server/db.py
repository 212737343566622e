"""Async SQLAlchemy engine, session factory and schema bootstrap.

요청마다 AsyncSession 하나를 생성하고 요청이 끝나면 자동으로 닫습니다.
회원 가입의 중복 검사 → 저장은 같은 세션(트랜잭션) 안에서 실행되며,
최종 중복 판정은 DB의 unique 제약 조건이 담당합니다.
"""
import logging
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from board.server.settings import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI 의존성: 요청 단위 DB 세션."""
    async with SessionLocal() as session:
        yield session


async def init_db(seed_roles: bool = True) -> None:
    """테이블을 생성하고 필요하면 RoleType 시드 데이터를 채웁니다.

    Args:
        seed_roles: True이면 누락된 RoleType 행을 추가
    """
    # 모델이 metadata에 등록되도록 import
    from board.models import member, role  # noqa: F401
    from board.models.role import RoleType
    from board.repositories.role_repo import RoleRepository

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))

    if not seed_roles:
        return

    async with SessionLocal() as session:
        created = await RoleRepository(session).ensure_roles(list(RoleType))
        if created:
            logger.info("Seeded roles: %s", ", ".join(r.role_type.value for r in created))


async def close_db() -> None:
    await engine.dispose()
