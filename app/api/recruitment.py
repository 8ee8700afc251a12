"""모집 신청 라우터 — 신청, 취소, 작성자 승인/거절 API.

Recruitment Router — apply to, cancel, and decide on applications.
"""

from fastapi import APIRouter, status

from app.api.deps import CurrentUser, DbSession
from app.schemas.common import MessageResponse
from app.schemas.post import RecruitmentStatusChange
from app.services.recruitment_user_service import recruitment_user_service

router: APIRouter = APIRouter()


@router.post(
    "/{post_id}/recruitment",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def apply_recruitment(
    post_id: int,
    db: DbSession,
    current_user: CurrentUser,
) -> MessageResponse:
    """모집 게시글에 신청합니다 (Apply to a recruitment post)."""
    await recruitment_user_service.save_recruitment(db, current_user, post_id)
    await db.commit()
    return MessageResponse(message="Recruitment application submitted")


@router.delete("/{post_id}/recruitment", response_model=MessageResponse)
async def cancel_recruitment(
    post_id: int,
    db: DbSession,
    current_user: CurrentUser,
) -> MessageResponse:
    """모집 신청을 취소합니다 (Cancel own application)."""
    await recruitment_user_service.cancel_recruitment(db, current_user, post_id)
    await db.commit()
    return MessageResponse(message="Recruitment application cancelled")


@router.patch("/{post_id}/recruitment/{user_id}", response_model=MessageResponse)
async def change_recruitment_status(
    post_id: int,
    user_id: int,
    data: RecruitmentStatusChange,
    db: DbSession,
    current_user: CurrentUser,
) -> MessageResponse:
    """작성자가 신청을 승인 또는 거절합니다 (Author accepts or rejects an application)."""
    recruitment_user = await recruitment_user_service.change_recruitment_status(
        db, current_user, post_id, user_id, data.status
    )
    await db.commit()
    return MessageResponse(message=f"Application {recruitment_user.status.value}")
