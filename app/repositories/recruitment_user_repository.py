"""모집 신청 레포지토리.

Recruitment User Repository — application lookups by (post, user).
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.recruitment_user import RecruitmentUser, RecruitmentUserStatus
from app.repositories.base import BaseRepository


class RecruitmentUserRepository(BaseRepository[RecruitmentUser]):
    """recruitment_users 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(RecruitmentUser)

    async def find_by_post_and_user(
        self,
        db: AsyncSession,
        post_id: int,
        user_id: int,
    ) -> RecruitmentUser | None:
        """게시글과 사용자로 신청 내역을 조회합니다.

        Find the application of ``user_id`` to ``post_id``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 모집 게시글 ID (Recruitment post ID)
            user_id: 신청자 ID (Applicant ID)

        Returns:
            RecruitmentUser | None: 신청 내역 또는 None
        """
        query: Select = select(RecruitmentUser).where(
            RecruitmentUser.post_id == post_id,
            RecruitmentUser.user_id == user_id,
        )
        result = await db.execute(query)
        # 저장소 유니크 제약이 없으므로 중복이 있어도 첫 건만 사용
        return result.scalars().first()

    async def count_by_post_and_status(
        self,
        db: AsyncSession,
        post_id: int,
        status: RecruitmentUserStatus,
    ) -> int:
        query: Select = select(func.count()).select_from(RecruitmentUser).where(
            RecruitmentUser.post_id == post_id,
            RecruitmentUser.status == status,
        )
        return (await db.execute(query)).scalar() or 0


# 싱글턴 인스턴스 — Singleton instance
recruitment_user_repository: RecruitmentUserRepository = RecruitmentUserRepository()
