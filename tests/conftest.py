"""Pytest configuration and fixtures.

이 모듈은 모든 테스트에서 공유되는 pytest fixture들을 정의합니다.

주요 Fixture:
- db_url: 테스트마다 새로 만드는 임시 SQLite 파일 URL
- client: 임시 DB에 연결된 FastAPI 테스트 클라이언트 (lifespan 실행 → 테이블/권한 시드)
- unseeded_client: 권한 시드 없이 시작한 테스트 클라이언트
- session: 테이블과 권한이 준비된 AsyncSession (저장소 테스트용)
- member_repo / role_repo / password_hasher / authentication_manager / token_service:
  SignService 단위 테스트용 mock 협력 객체
- sign_service: mock 협력 객체를 주입한 SignService
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from unittest.mock import AsyncMock, MagicMock, patch

from board.models import Role, RoleType
from board.repositories.role_repo import RoleRepository
from board.server.db import Base
from board.server.deps import get_token_service
from board.server.main import app
from board.server.security import Authentication, TokenService
from board.server.settings import settings
from board.services.sign_service import SignService

from factories import TEST_SECRET_KEY


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'board.db'}"


def _make_session_factory(db_url):
    engine = create_async_engine(db_url, poolclass=NullPool)
    return engine, async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
def client(db_url):
    """임시 DB에 연결된 FastAPI 테스트 클라이언트를 생성합니다.

    설명:
        - board.server.db의 engine/SessionLocal을 테스트 DB로 교체
        - with 블록 안에서 lifespan이 실행되어 테이블 생성 + 권한 시드
        - 토큰 서명 키는 테스트 전용 키 사용 (dependency override)
    """
    engine, session_factory = _make_session_factory(db_url)
    app.dependency_overrides[get_token_service] = lambda: TokenService(secret_key=TEST_SECRET_KEY)
    with patch("board.server.db.engine", engine), \
         patch("board.server.db.SessionLocal", session_factory):
        with TestClient(app) as test_client:
            yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unseeded_client(db_url):
    """권한(Role) 시드 데이터 없이 시작한 테스트 클라이언트."""
    engine, session_factory = _make_session_factory(db_url)
    app.dependency_overrides[get_token_service] = lambda: TokenService(secret_key=TEST_SECRET_KEY)
    with patch("board.server.db.engine", engine), \
         patch("board.server.db.SessionLocal", session_factory), \
         patch.object(settings, "SEED_ROLES", False):
        with TestClient(app) as test_client:
            yield test_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def session(db_url):
    """테이블과 권한 시드가 준비된 AsyncSession."""
    engine, session_factory = _make_session_factory(db_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as db_session:
        await RoleRepository(db_session).ensure_roles(list(RoleType))
        yield db_session

    await engine.dispose()


@pytest.fixture
def test_token_service():
    return TokenService(secret_key=TEST_SECRET_KEY, algorithm="HS256", expire_minutes=5)


# ============================================================================
# SignService 단위 테스트용 mock 협력 객체
# ============================================================================

@pytest.fixture
def member_repo():
    """신규 가입이 가능한 상태(중복 없음)를 기본값으로 하는 회원 저장소 mock."""
    repo = MagicMock()
    repo.find_by_username = AsyncMock(return_value=None)
    repo.find_one_with_roles_by_username = AsyncMock(return_value=None)
    repo.exists_by_username = AsyncMock(return_value=False)
    repo.exists_by_email = AsyncMock(return_value=False)
    repo.save = AsyncMock(side_effect=lambda member: member)
    return repo


@pytest.fixture
def role_repo():
    repo = MagicMock()
    repo.find_by_role_type = AsyncMock(return_value=Role(RoleType.USER))
    return repo


@pytest.fixture
def password_hasher():
    hasher = MagicMock()
    hasher.hash.side_effect = lambda plain: f"hashed::{plain[::-1]}"
    return hasher


@pytest.fixture
def authentication_manager():
    manager = MagicMock()
    manager.authenticate = AsyncMock(return_value=Authentication(name="user", authorities=["USER"]))
    return manager


@pytest.fixture
def token_service():
    service = MagicMock()
    service.create_access_token.return_value = "signed.jwt.token"
    return service


@pytest.fixture
def sign_service(member_repo, role_repo, password_hasher, authentication_manager, token_service):
    return SignService(
        member_repo=member_repo,
        role_repo=role_repo,
        password_hasher=password_hasher,
        authentication_manager=authentication_manager,
        token_service=token_service,
    )
