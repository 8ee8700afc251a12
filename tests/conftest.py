"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: in-memory SQLite (aiosqlite) database, session and
httpx client fixtures. The schema is created for every test on a fresh
engine, so tests never share data.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403
from app.models.job_posting import JobPosting
from app.models.post import Category, RecruitmentPost, RecruitmentStatus
from app.models.user import JobSkill, SiteUser
from app.utils.jwt import create_access_token

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 단일 커넥션을 공유하는 인메모리 DB."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _persist(db: AsyncSession, obj):
    db.add(obj)
    await db.flush()
    await db.refresh(obj)
    return obj


@pytest_asyncio.fixture
async def author(db: AsyncSession) -> SiteUser:
    """모집 게시글 작성자."""
    return await _persist(db, SiteUser(name="Author", email="author@test.com"))


@pytest_asyncio.fixture
async def applicant(db: AsyncSession) -> SiteUser:
    """신청자 (user A)."""
    return await _persist(db, SiteUser(name="Applicant", email="applicant@test.com"))


@pytest_asyncio.fixture
async def other_user(db: AsyncSession) -> SiteUser:
    """다른 사용자."""
    return await _persist(db, SiteUser(name="Other", email="other@test.com"))


@pytest_asyncio.fixture
async def category(db: AsyncSession) -> Category:
    return await _persist(db, Category(name="recruitment"))


@pytest_asyncio.fixture
async def skills(db: AsyncSession) -> dict[str, JobSkill]:
    """기본 직무 스킬 3개."""
    result = {}
    for code, name in enumerate(["Python", "Kotlin", "SQL"], start=1):
        result[name] = await _persist(db, JobSkill(name=name, code=code))
    return result


@pytest_asyncio.fixture
async def job_posting(db: AsyncSession, skills) -> JobPosting:
    return await _persist(db, JobPosting(
        subject="Backend Engineer",
        company_name="Acme",
        salary_code=3,
        salary_name="40M+",
        experience_level_code=1,
        experience_level_name="Junior",
        require_educate_code=2,
        require_educate_name="Bachelor",
        apply_cnt=5,
        job_skills=[skills["Python"], skills["SQL"]],
    ))


def _recruitment_post(author: SiteUser, category: Category, **kwargs) -> RecruitmentPost:
    values = {
        "subject": "Study group",
        "content": "Looking for teammates",
        "author_id": author.id,
        "category_id": category.id,
        "recruitment_closing_date": datetime.now(timezone.utc) + timedelta(days=7),
        "num_of_applicants": 3,
        "recruitment_status": RecruitmentStatus.OPEN,
    }
    values.update(kwargs)
    return RecruitmentPost(**values)


@pytest_asyncio.fixture
async def open_post(db: AsyncSession, author, category, job_posting) -> RecruitmentPost:
    """모집 중인 게시글 (post P)."""
    return await _persist(db, _recruitment_post(author, category, job_posting_id=job_posting.id))


@pytest_asyncio.fixture
async def closed_post(db: AsyncSession, author, category) -> RecruitmentPost:
    """모집이 마감된 게시글."""
    return await _persist(db, _recruitment_post(
        author, category, subject="Closed study", recruitment_status=RecruitmentStatus.CLOSED
    ))


@pytest.fixture
def make_post(db: AsyncSession, author, category):
    """추가 모집 게시글 생성 팩토리."""
    async def _make(**kwargs) -> RecruitmentPost:
        return await _persist(db, _recruitment_post(author, category, **kwargs))
    return _make


def make_token(user: SiteUser) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(user.id)})


@pytest.fixture
def author_token(author) -> str:
    return make_token(author)


@pytest.fixture
def applicant_token(applicant) -> str:
    return make_token(applicant)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
