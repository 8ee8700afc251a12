"""모집 신청 서비스 테스트.

RecruitmentUserService tests: apply/cancel workflow, status-scoped listing
and author decisions, exercised directly against the service layer.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import RecruitmentStatus
from app.models.recruitment_user import RecruitmentUser, RecruitmentUserStatus
from app.services.recruitment_user_service import RecruitmentUserService, recruitment_user_service
from app.utils.exceptions import GlobalErrorCode, GlobalException


async def _count_applications(db: AsyncSession, post_id: int, user_id: int) -> int:
    result = await db.execute(
        select(func.count()).select_from(RecruitmentUser).where(
            RecruitmentUser.post_id == post_id, RecruitmentUser.user_id == user_id
        )
    )
    return result.scalar()


class TestSaveRecruitment:
    """모집 신청 테스트."""

    async def test_apply_creates_applied_record(self, db, applicant, open_post):
        """신청 성공 시 APPLIED 신청이 하나 생성된다."""
        saved = await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        assert saved.status == RecruitmentUserStatus.APPLIED
        assert saved.post_id == open_post.id
        assert saved.user_id == applicant.id
        assert await _count_applications(db, open_post.id, applicant.id) == 1

    async def test_apply_to_missing_post(self, db, applicant):
        """존재하지 않는 게시글 신청 시 POST_NOT_FOUND."""
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.save_recruitment(db, applicant, 9999)
        assert exc_info.value.code == GlobalErrorCode.POST_NOT_FOUND

    async def test_apply_to_closed_post(self, db, applicant, closed_post):
        """마감된 게시글 신청 시 RECRUITMENT_CLOSED."""
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.save_recruitment(db, applicant, closed_post.id)
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_CLOSED
        assert await _count_applications(db, closed_post.id, applicant.id) == 0

    async def test_apply_past_closing_date(self, db, applicant, make_post):
        """OPEN 상태라도 마감일이 지났으면 RECRUITMENT_CLOSED."""
        post = await make_post(recruitment_closing_date=datetime.now(timezone.utc) - timedelta(minutes=1))
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.save_recruitment(db, applicant, post.id)
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_CLOSED
        assert post.recruitment_status == RecruitmentStatus.OPEN

    async def test_apply_twice(self, db, applicant, open_post):
        """같은 게시글에 두 번 신청하면 두 번째는 ALREADY_RECRUITMENT."""
        await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        assert exc_info.value.code == GlobalErrorCode.ALREADY_RECRUITMENT
        assert await _count_applications(db, open_post.id, applicant.id) == 1

    async def test_different_users_apply_independently(self, db, applicant, other_user, open_post):
        """서로 다른 사용자의 신청은 독립적이다."""
        await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        await recruitment_user_service.save_recruitment(db, other_user, open_post.id)
        assert await _count_applications(db, open_post.id, applicant.id) == 1
        assert await _count_applications(db, open_post.id, other_user.id) == 1

    async def test_duplicate_check_runs_before_closed_check(self, db, applicant, make_post):
        """이미 신청한 뒤 마감된 게시글에 재신청하면 ALREADY_RECRUITMENT."""
        post = await make_post()
        await recruitment_user_service.save_recruitment(db, applicant, post.id)
        post.update_recruitment_status(RecruitmentStatus.CLOSED)
        await db.flush()

        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.save_recruitment(db, applicant, post.id)
        assert exc_info.value.code == GlobalErrorCode.ALREADY_RECRUITMENT


class TestCancelRecruitment:
    """모집 신청 취소 테스트."""

    async def test_cancel_without_application(self, db, applicant, open_post):
        """신청 내역 없이 취소하면 RECRUITMENT_NOT_FOUND."""
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.cancel_recruitment(db, applicant, open_post.id)
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_NOT_FOUND

    async def test_cancel_missing_post(self, db, applicant):
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.cancel_recruitment(db, applicant, 9999)
        assert exc_info.value.code == GlobalErrorCode.POST_NOT_FOUND

    async def test_cancel_on_closed_post_with_application(self, db, applicant, closed_post):
        """신청 내역이 있어도 마감된 게시글은 취소 불가."""
        db.add(RecruitmentUser(
            post_id=closed_post.id, user_id=applicant.id, status=RecruitmentUserStatus.APPLIED
        ))
        await db.flush()

        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.cancel_recruitment(db, applicant, closed_post.id)
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_CLOSED
        assert await _count_applications(db, closed_post.id, applicant.id) == 1

    async def test_apply_cancel_lifecycle(self, db, applicant, open_post):
        """신청 → 재신청 실패 → 취소 → 재취소 실패."""
        await recruitment_user_service.save_recruitment(db, applicant, open_post.id)

        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        assert exc_info.value.code == GlobalErrorCode.ALREADY_RECRUITMENT

        await recruitment_user_service.cancel_recruitment(db, applicant, open_post.id)
        assert await _count_applications(db, open_post.id, applicant.id) == 0

        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.cancel_recruitment(db, applicant, open_post.id)
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_NOT_FOUND


class TestGetAcceptedPosts:
    """상태별 신청 게시글 조회 테스트."""

    async def test_unknown_status(self, db, applicant):
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.get_accepted_posts(db, applicant, "WAITING")
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_STATUS_NOT_SUPPORT

    async def test_filters_by_status_and_user(self, db, applicant, other_user, make_post):
        """요청자의 신청 상태가 일치하는 게시글만 반환한다."""
        applied_post = await make_post(subject="Applied one")
        accepted_post = await make_post(subject="Accepted one")
        db.add_all([
            RecruitmentUser(post_id=applied_post.id, user_id=applicant.id, status=RecruitmentUserStatus.APPLIED),
            RecruitmentUser(post_id=accepted_post.id, user_id=applicant.id, status=RecruitmentUserStatus.ACCEPTED),
            RecruitmentUser(post_id=applied_post.id, user_id=other_user.id, status=RecruitmentUserStatus.ACCEPTED),
        ])
        await db.flush()

        result = await recruitment_user_service.get_accepted_posts(db, applicant, "accepted")
        assert result.status == RecruitmentUserStatus.ACCEPTED
        assert result.posts.total == 1
        assert [p.id for p in result.posts.items] == [accepted_post.id]
        assert result.posts.items[0].subject == "Accepted one"
        assert result.posts.items[0].author_name == "Author"

        applied = await recruitment_user_service.get_accepted_posts(db, applicant, "APPLIED")
        assert [p.id for p in applied.posts.items] == [applied_post.id]

    async def test_pagination(self, db, applicant, make_post):
        for i in range(3):
            post = await make_post(subject=f"Post {i}")
            db.add(RecruitmentUser(post_id=post.id, user_id=applicant.id, status=RecruitmentUserStatus.APPLIED))
        await db.flush()

        result = await recruitment_user_service.get_accepted_posts(
            db, applicant, "APPLIED", page=2, per_page=2
        )
        assert result.posts.total == 3
        assert result.posts.pages == 2
        assert len(result.posts.items) == 1

    async def test_duplicate_applications_counted_once(self, db, applicant, open_post):
        """같은 게시글의 중복 신청 행은 게시글 하나로 집계된다."""
        db.add_all([
            RecruitmentUser(post_id=open_post.id, user_id=applicant.id, status=RecruitmentUserStatus.APPLIED),
            RecruitmentUser(post_id=open_post.id, user_id=applicant.id, status=RecruitmentUserStatus.APPLIED),
        ])
        await db.flush()

        result = await recruitment_user_service.get_accepted_posts(db, applicant, "APPLIED")
        assert result.posts.total == 1
        assert result.posts.pages == 1
        assert [p.id for p in result.posts.items] == [open_post.id]

    async def test_page_below_one_is_first_page(self, db, applicant, open_post):
        db.add(RecruitmentUser(post_id=open_post.id, user_id=applicant.id, status=RecruitmentUserStatus.APPLIED))
        await db.flush()

        result = await recruitment_user_service.get_accepted_posts(
            db, applicant, "APPLIED", page=0, per_page=0
        )
        assert result.posts.page == 1
        assert result.posts.per_page == 1
        assert [p.id for p in result.posts.items] == [open_post.id]


class TestChangeRecruitmentStatus:
    """작성자 승인/거절 테스트."""

    async def test_accept(self, db, author, applicant, open_post):
        await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        updated = await recruitment_user_service.change_recruitment_status(
            db, author, open_post.id, applicant.id, "ACCEPTED"
        )
        assert updated.status == RecruitmentUserStatus.ACCEPTED

    async def test_only_author_can_decide(self, db, applicant, other_user, open_post):
        await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.change_recruitment_status(
                db, other_user, open_post.id, applicant.id, "ACCEPTED"
            )
        assert exc_info.value.code == GlobalErrorCode.POST_NOT_AUTHOR

    async def test_applied_is_not_a_decision(self, db, author, applicant, open_post):
        await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.change_recruitment_status(
                db, author, open_post.id, applicant.id, "APPLIED"
            )
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_STATUS_NOT_SUPPORT

    async def test_decided_application_cannot_change(self, db, author, applicant, open_post):
        await recruitment_user_service.save_recruitment(db, applicant, open_post.id)
        await recruitment_user_service.change_recruitment_status(
            db, author, open_post.id, applicant.id, "REJECTED"
        )
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.change_recruitment_status(
                db, author, open_post.id, applicant.id, "ACCEPTED"
            )
        assert exc_info.value.code == GlobalErrorCode.INVALID_RECRUITMENT_TRANSITION

    async def test_closed_post_blocks_decision(self, db, author, applicant, closed_post):
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.change_recruitment_status(
                db, author, closed_post.id, applicant.id, "ACCEPTED"
            )
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_CLOSED

    async def test_missing_application(self, db, author, applicant, open_post):
        with pytest.raises(GlobalException) as exc_info:
            await recruitment_user_service.change_recruitment_status(
                db, author, open_post.id, applicant.id, "ACCEPTED"
            )
        assert exc_info.value.code == GlobalErrorCode.RECRUITMENT_NOT_FOUND


class _EmptyPostRepository:
    """게시글이 없는 레포지토리 대역 (Stub returning no post)."""

    async def find_by_id_fetch(self, db, post_id):
        return None


async def test_collaborators_are_injected(db, applicant):
    """생성자로 주입된 레포지토리를 사용한다."""
    service = RecruitmentUserService(recruitment_post_repo=_EmptyPostRepository())
    with pytest.raises(GlobalException) as exc_info:
        await service.save_recruitment(db, applicant, 1)
    assert exc_info.value.code == GlobalErrorCode.POST_NOT_FOUND
