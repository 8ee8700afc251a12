"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, the session factory that acts as the
unit of work for every service call, and the ORM base class.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션을 구성합니다.

    Build engine keyword arguments for the configured driver.
    Pool sizing and prepared-statement settings only apply to asyncpg.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if url.startswith("postgresql+asyncpg"):
        options.update(
            pool_size=5,
            max_overflow=10,
            # 트랜잭션 모드 풀러 사용 시 prepared statement 캐시 비활성화
            connect_args={"statement_cache_size": 0},
        )
    return options


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL)
)

# 비동기 세션 팩토리 (expire_on_commit=False: 커밋 후에도 속성 접근 가능)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 비동기 세션(작업 단위)을 제공합니다.

    FastAPI dependency yielding one session per request. Routers commit after
    a successful service call; anything uncommitted is rolled back on close.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
