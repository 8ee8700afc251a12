"""모집 신청 서비스 — 신청/취소 및 상태별 신청 게시글 조회 비즈니스 로직.

Recruitment User Service — apply/cancel workflow, author decisions and
status-scoped listing of the posts a user applied to.

Each method runs inside the caller's session (unit of work) and raises
``GlobalException`` on the first failed check; nothing is retried.
"""

from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Post, RecruitmentPost
from app.models.recruitment_user import RecruitmentUser, RecruitmentUserStatus
from app.models.user import SiteUser
from app.repositories.post_repository import PostRepository, post_repository
from app.repositories.recruitment_post_repository import (
    RecruitmentPostRepository,
    recruitment_post_repository,
)
from app.repositories.recruitment_user_repository import (
    RecruitmentUserRepository,
    recruitment_user_repository,
)
from app.schemas.post import PostPageResponse, RecruitmentUserPostResponse
from app.utils.exceptions import GlobalErrorCode, GlobalException
from app.utils.pagination import build_page

# 작성자가 내릴 수 있는 결정 — Decisions an author may take on an application
_DECISIONS = {RecruitmentUserStatus.ACCEPTED, RecruitmentUserStatus.REJECTED}


class RecruitmentUserService:
    """모집 신청 관련 비즈니스 로직을 처리하는 서비스.

    Service guarding and executing the recruitment application workflow.

    Args:
        recruitment_user_repo: 모집 신청 레포지토리 (Application repository)
        post_repo: 게시글 레포지토리 (Post repository)
        recruitment_post_repo: 모집 게시글 레포지토리 (Recruitment post repository)
    """

    def __init__(
        self,
        recruitment_user_repo: RecruitmentUserRepository = recruitment_user_repository,
        post_repo: PostRepository = post_repository,
        recruitment_post_repo: RecruitmentPostRepository = recruitment_post_repository,
    ) -> None:
        self.recruitment_user_repo = recruitment_user_repo
        self.post_repo = post_repo
        self.recruitment_post_repo = recruitment_post_repo

    # ------------------------------------------------------------------
    # 비즈니스 로직 — Business operations
    # ------------------------------------------------------------------

    async def save_recruitment(
        self,
        db: AsyncSession,
        site_user: SiteUser,
        post_id: int,
    ) -> RecruitmentUser:
        """모집 게시글에 신청합니다.

        Apply ``site_user`` to the recruitment post ``post_id``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            site_user: 신청자 (Applicant)
            post_id: 모집 게시글 ID (Recruitment post ID)

        Returns:
            RecruitmentUser: APPLIED 상태로 저장된 신청 (Persisted APPLIED application)

        Raises:
            GlobalException(POST_NOT_FOUND): 게시글 없음
            GlobalException(ALREADY_RECRUITMENT): 이미 신청함
            GlobalException(RECRUITMENT_CLOSED): 모집 종료
        """
        post: RecruitmentPost = await self._get_post(db, post_id)

        await self._check_recruitment_condition(db, site_user, post)

        recruitment_user = RecruitmentUser(
            post_id=post.id,
            user_id=site_user.id,
            status=RecruitmentUserStatus.APPLIED,
        )
        return await self.recruitment_user_repo.save(db, recruitment_user)

    async def cancel_recruitment(
        self,
        db: AsyncSession,
        site_user: SiteUser,
        post_id: int,
    ) -> None:
        """본인의 모집 신청을 취소(삭제)합니다.

        Cancel the user's application by deleting it.

        Raises:
            GlobalException(POST_NOT_FOUND): 게시글 없음
            GlobalException(RECRUITMENT_CLOSED): 모집 종료 후에는 취소 불가
            GlobalException(RECRUITMENT_NOT_FOUND): 신청 내역 없음
        """
        post: RecruitmentPost = await self._get_post(db, post_id)

        self._validate_recruitment_not_closed(post)

        recruitment_user: RecruitmentUser = await self._get_recruitment_user(
            db, post.id, site_user.id
        )
        await self.recruitment_user_repo.delete(db, recruitment_user)

    async def get_accepted_posts(
        self,
        db: AsyncSession,
        site_user: SiteUser,
        status: str,
        page: int = 1,
        per_page: int = 20,
    ) -> RecruitmentUserPostResponse:
        """사용자가 특정 신청 상태로 참여한 게시글을 페이지 단위로 조회합니다.

        List, one page at a time, the posts where the user holds an
        application with ``status`` (APPLIED, ACCEPTED or REJECTED).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            site_user: 현재 사용자 (Current user)
            status: 신청 상태 문자열 (Status string, case-insensitive)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지 크기 (Page size)

        Returns:
            RecruitmentUserPostResponse: 상태와 게시글 페이지 (Status and post page)

        Raises:
            GlobalException(RECRUITMENT_STATUS_NOT_SUPPORT): 알 수 없는 상태
        """
        recruitment_user_status = RecruitmentUserStatus.from_value(status)
        if recruitment_user_status is None:
            raise GlobalException(GlobalErrorCode.RECRUITMENT_STATUS_NOT_SUPPORT)

        # 1페이지 미만, 0 이하 크기는 최소값으로 보정
        page = max(page, 1)
        per_page = max(per_page, 1)

        posts, total = await self.post_repo.find_recruitment_all(
            db, site_user.id, recruitment_user_status, page, per_page
        )
        return RecruitmentUserPostResponse(
            status=recruitment_user_status,
            posts=build_page(PostPageResponse, self._to_page_items(posts), total, page, per_page),
        )

    async def change_recruitment_status(
        self,
        db: AsyncSession,
        author: SiteUser,
        post_id: int,
        applicant_id: int,
        status: str,
    ) -> RecruitmentUser:
        """작성자가 신청을 승인 또는 거절합니다.

        Let the post author move an APPLIED application to ACCEPTED or
        REJECTED while the recruitment is still open.

        Raises:
            GlobalException(POST_NOT_FOUND): 게시글 없음
            GlobalException(POST_NOT_AUTHOR): 작성자가 아님
            GlobalException(RECRUITMENT_CLOSED): 모집 종료
            GlobalException(RECRUITMENT_STATUS_NOT_SUPPORT): ACCEPTED/REJECTED 외의 값
            GlobalException(RECRUITMENT_NOT_FOUND): 신청 내역 없음
            GlobalException(INVALID_RECRUITMENT_TRANSITION): 이미 결정된 신청
        """
        post: RecruitmentPost = await self._get_post(db, post_id)
        if post.author_id != author.id:
            raise GlobalException(GlobalErrorCode.POST_NOT_AUTHOR)

        self._validate_recruitment_not_closed(post)

        target = RecruitmentUserStatus.from_value(status)
        if target not in _DECISIONS:
            raise GlobalException(GlobalErrorCode.RECRUITMENT_STATUS_NOT_SUPPORT)

        recruitment_user: RecruitmentUser = await self._get_recruitment_user(
            db, post.id, applicant_id
        )
        if recruitment_user.status != RecruitmentUserStatus.APPLIED:
            raise GlobalException(GlobalErrorCode.INVALID_RECRUITMENT_TRANSITION)

        recruitment_user.update_status(target)
        await db.flush()
        return recruitment_user

    # ------------------------------------------------------------------
    # 유효성 검증 — Validation helpers
    # ------------------------------------------------------------------

    async def _is_already_applied(
        self, db: AsyncSession, site_user: SiteUser, post_id: int
    ) -> bool:
        existing = await self.recruitment_user_repo.find_by_post_and_user(
            db, post_id, site_user.id
        )
        return existing is not None

    def _validate_recruitment_not_closed(self, post: RecruitmentPost) -> None:
        """CLOSED 이거나 마감일이 지난 게시글은 모집 종료로 취급합니다.

        A post past its closing date counts as closed even before the
        expiry sweep has flipped its status.
        """
        if post.is_closed or post.is_past_closing_date(datetime.now(timezone.utc)):
            raise GlobalException(GlobalErrorCode.RECRUITMENT_CLOSED)

    async def _check_recruitment_condition(
        self, db: AsyncSession, site_user: SiteUser, post: RecruitmentPost
    ) -> None:
        """신청 가능 여부 검증 — 중복 신청 여부를 먼저, 그다음 모집 종료 여부.

        Duplicate check runs before the closed check.
        """
        if await self._is_already_applied(db, site_user, post.id):
            raise GlobalException(GlobalErrorCode.ALREADY_RECRUITMENT)

        self._validate_recruitment_not_closed(post)

    # ------------------------------------------------------------------
    # 조회 — Lookups
    # ------------------------------------------------------------------

    async def _get_recruitment_user(
        self, db: AsyncSession, post_id: int, user_id: int
    ) -> RecruitmentUser:
        recruitment_user = await self.recruitment_user_repo.find_by_post_and_user(
            db, post_id, user_id
        )
        if recruitment_user is None:
            raise GlobalException(GlobalErrorCode.RECRUITMENT_NOT_FOUND)
        return recruitment_user

    async def _get_post(self, db: AsyncSession, post_id: int) -> RecruitmentPost:
        post = await self.recruitment_post_repo.find_by_id_fetch(db, post_id)
        if post is None:
            raise GlobalException(GlobalErrorCode.POST_NOT_FOUND)
        return post

    def _to_page_items(self, posts: Sequence[Post]) -> list[PostPageResponse]:
        return [
            PostPageResponse(
                id=post.id,
                subject=post.subject,
                category_name=post.category.name,
                author_id=post.author_id,
                author_name=post.author.name,
                created_at=post.created_at,
            )
            for post in posts
        ]


# 싱글턴 인스턴스 — Singleton instance
recruitment_user_service: RecruitmentUserService = RecruitmentUserService()
