"""사용자 레포지토리 — 사이트 사용자 조회.

User Repository — lookups for site users.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.user import SiteUser
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[SiteUser]):
    """site_users 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the site_users table.
    """

    def __init__(self) -> None:
        super().__init__(SiteUser)

    async def find_by_id(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> SiteUser | None:
        """사용자를 스킬 목록과 함께 조회합니다.

        Retrieve a user with the skill set loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User ID)

        Returns:
            SiteUser | None: 스킬이 로드된 사용자 또는 None
        """
        query: Select = (
            select(SiteUser)
            .options(selectinload(SiteUser.job_skills))
            .where(SiteUser.id == user_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
