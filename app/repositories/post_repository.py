"""게시글 레포지토리 — 신청 상태별 게시글 페이지 조회.

Post Repository — paged queries over posts joined with applications.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Post
from app.models.recruitment_user import RecruitmentUser, RecruitmentUserStatus
from app.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """posts 테이블 레포지토리 (Repository for the posts table)."""

    def __init__(self) -> None:
        super().__init__(Post)

    async def find_recruitment_all(
        self,
        db: AsyncSession,
        user_id: int,
        status: RecruitmentUserStatus,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Post], int]:
        """사용자가 특정 상태로 신청한 게시글을 페이지 단위로 조회합니다.

        Page through posts where ``user_id`` holds an application with
        ``status``, newest post first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 신청자 ID (Applicant ID)
            status: 신청 상태 (Application status to match)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지 크기 (Page size)

        Returns:
            tuple[Sequence[Post], int]: (게시글 목록, 전체 개수)
        """
        query: Select = (
            select(Post)
            .join(RecruitmentUser, RecruitmentUser.post_id == Post.id)
            .where(
                RecruitmentUser.user_id == user_id,
                RecruitmentUser.status == status,
            )
            # 중복 신청 행이 있어도 게시글은 한 번만 집계
            .distinct()
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return await self.get_paginated(db, query, page, per_page)


# 싱글턴 인스턴스 — Singleton instance
post_repository: PostRepository = PostRepository()
