"""모집 게시글 서비스 — 상세 조회, 수정, 모집 마감 비즈니스 로직.

Recruitment Post Service — detail view, author-only edits and closing.
The recruitment status only ever moves from OPEN to CLOSED.
"""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import RecruitmentPost, RecruitmentStatus
from app.models.recruitment_user import RecruitmentUserStatus
from app.models.user import SiteUser
from app.repositories.recruitment_post_repository import (
    RecruitmentPostRepository,
    recruitment_post_repository,
)
from app.repositories.recruitment_user_repository import (
    RecruitmentUserRepository,
    recruitment_user_repository,
)
from app.schemas.post import RecruitmentPostResponse, RecruitmentPostUpdate
from app.utils.exceptions import GlobalErrorCode, GlobalException


class RecruitmentPostService:
    """모집 게시글 비즈니스 로직을 처리하는 서비스.

    Service handling recruitment post reads, edits and closing.
    """

    def __init__(
        self,
        recruitment_post_repo: RecruitmentPostRepository = recruitment_post_repository,
        recruitment_user_repo: RecruitmentUserRepository = recruitment_user_repository,
    ) -> None:
        self.recruitment_post_repo = recruitment_post_repo
        self.recruitment_user_repo = recruitment_user_repo

    async def _to_response(
        self,
        db: AsyncSession,
        post: RecruitmentPost,
        requester: SiteUser,
    ) -> RecruitmentPostResponse:
        """게시글을 요청자 기준 상세 응답으로 변환합니다.

        Convert a post into a detail response personalised for the requester.
        Requires author, category and job posting to be loaded.
        """
        application = await self.recruitment_user_repo.find_by_post_and_user(
            db, post.id, requester.id
        )
        accepted_count: int = await self.recruitment_user_repo.count_by_post_and_status(
            db, post.id, RecruitmentUserStatus.ACCEPTED
        )
        return RecruitmentPostResponse(
            id=post.id,
            subject=post.subject,
            content=post.content,
            category_name=post.category.name,
            author_id=post.author_id,
            author_name=post.author.name,
            recruitment_closing_date=post.recruitment_closing_date,
            num_of_applicants=post.num_of_applicants,
            recruitment_status=post.recruitment_status,
            job_posting_id=post.job_posting_id,
            job_posting_subject=post.job_posting.subject if post.job_posting else None,
            is_author=post.author_id == requester.id,
            my_recruitment_status=application.status if application else None,
            accepted_count=accepted_count,
            created_at=post.created_at,
        )

    async def _get_post(self, db: AsyncSession, post_id: int) -> RecruitmentPost:
        post: RecruitmentPost | None = await self.recruitment_post_repo.find_by_id_fetch(db, post_id)
        if post is None:
            raise GlobalException(GlobalErrorCode.POST_NOT_FOUND)
        return post

    async def _get_own_post(
        self, db: AsyncSession, post_id: int, requester: SiteUser
    ) -> RecruitmentPost:
        post: RecruitmentPost = await self._get_post(db, post_id)
        if post.author_id != requester.id:
            raise GlobalException(GlobalErrorCode.POST_NOT_AUTHOR)
        return post

    async def get_post(
        self,
        db: AsyncSession,
        post_id: int,
        requester: SiteUser,
    ) -> RecruitmentPostResponse:
        """모집 게시글 상세를 조회합니다.

        Retrieve a recruitment post with the requester's own application
        status.

        Raises:
            GlobalException(POST_NOT_FOUND): 게시글 없음
        """
        post: RecruitmentPost = await self._get_post(db, post_id)
        return await self._to_response(db, post, requester)

    async def modify_post(
        self,
        db: AsyncSession,
        post_id: int,
        requester: SiteUser,
        data: RecruitmentPostUpdate,
    ) -> RecruitmentPostResponse:
        """작성자가 게시글 제목, 본문, 모집 인원을 수정합니다.

        Author-only edit of subject, content and applicant capacity.

        Raises:
            GlobalException(POST_NOT_FOUND): 게시글 없음
            GlobalException(POST_NOT_AUTHOR): 작성자가 아님
        """
        post: RecruitmentPost = await self._get_own_post(db, post_id, requester)

        post.update_post(data.subject, data.content, data.num_of_applicants)
        await db.flush()
        return await self._to_response(db, post, requester)

    async def close_recruitment(
        self,
        db: AsyncSession,
        post_id: int,
        requester: SiteUser,
    ) -> RecruitmentPostResponse:
        """작성자가 모집을 마감합니다.

        Author-only close. Closing twice fails with RECRUITMENT_CLOSED.

        Raises:
            GlobalException(POST_NOT_FOUND): 게시글 없음
            GlobalException(POST_NOT_AUTHOR): 작성자가 아님
            GlobalException(RECRUITMENT_CLOSED): 이미 마감됨
        """
        post: RecruitmentPost = await self._get_own_post(db, post_id, requester)
        if post.is_closed:
            raise GlobalException(GlobalErrorCode.RECRUITMENT_CLOSED)

        post.update_recruitment_status(RecruitmentStatus.CLOSED)
        await db.flush()
        return await self._to_response(db, post, requester)

    async def close_expired_posts(
        self,
        db: AsyncSession,
        now: datetime | None = None,
    ) -> int:
        """마감일이 지난 OPEN 게시글을 모두 마감합니다.

        Close every OPEN post whose closing date has passed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            now: 기준 시각, 기본값은 현재 UTC (Reference time, defaults to now in UTC)

        Returns:
            int: 마감 처리된 게시글 수 (Number of posts closed)
        """
        now = now or datetime.now(timezone.utc)
        posts: list[RecruitmentPost] = await self.recruitment_post_repo.find_expired_open(db, now)
        for post in posts:
            post.update_recruitment_status(RecruitmentStatus.CLOSED)
        await db.flush()
        return len(posts)


# 싱글턴 인스턴스 — Singleton instance
recruitment_post_service: RecruitmentPostService = RecruitmentPostService()
