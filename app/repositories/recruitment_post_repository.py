"""모집 게시글 레포지토리.

Recruitment Post Repository — lookups, fetch-joined detail and
closing-date sweeps for recruitment posts.
"""

from datetime import datetime

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.post import RecruitmentPost, RecruitmentStatus
from app.repositories.base import BaseRepository


class RecruitmentPostRepository(BaseRepository[RecruitmentPost]):
    """모집 게시글 레포지토리 (Repository for recruitment posts)."""

    def __init__(self) -> None:
        super().__init__(RecruitmentPost)

    async def find_by_id(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> RecruitmentPost | None:
        return await self.get_by_id(db, post_id)

    async def find_by_id_fetch(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> RecruitmentPost | None:
        """작성자, 카테고리, 채용 공고를 함께 로드하여 조회합니다.

        Retrieve a recruitment post with author, category and job posting
        loaded in the same round trip.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post ID)

        Returns:
            RecruitmentPost | None: 조회된 게시글 또는 None
        """
        query: Select = (
            select(RecruitmentPost)
            .options(
                joinedload(RecruitmentPost.author),
                joinedload(RecruitmentPost.category),
                joinedload(RecruitmentPost.job_posting),
            )
            .where(RecruitmentPost.id == post_id)
        )
        result = await db.execute(query)
        return result.unique().scalar_one_or_none()

    async def find_expired_open(
        self,
        db: AsyncSession,
        now: datetime,
    ) -> list[RecruitmentPost]:
        """마감일이 지났지만 아직 OPEN인 게시글을 조회합니다.

        Find OPEN posts whose closing date is at or before ``now``.
        """
        query: Select = select(RecruitmentPost).where(
            RecruitmentPost.recruitment_status == RecruitmentStatus.OPEN,
            RecruitmentPost.recruitment_closing_date.is_not(None),
            RecruitmentPost.recruitment_closing_date <= now,
        )
        result = await db.execute(query)
        return list(result.unique().scalars().all())


# 싱글턴 인스턴스 — Singleton instance
recruitment_post_repository: RecruitmentPostRepository = RecruitmentPostRepository()
