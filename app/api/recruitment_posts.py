"""모집 게시글 라우터 — 상세 조회, 수정, 마감 API.

Recruitment Post Router — detail, author edit and close.
"""

from fastapi import APIRouter

from app.api.deps import CurrentUser, DbSession
from app.schemas.post import RecruitmentPostResponse, RecruitmentPostUpdate
from app.services.recruitment_post_service import recruitment_post_service

router: APIRouter = APIRouter()


@router.get("/{post_id}", response_model=RecruitmentPostResponse)
async def get_recruitment_post(
    post_id: int,
    db: DbSession,
    current_user: CurrentUser,
) -> RecruitmentPostResponse:
    return await recruitment_post_service.get_post(db, post_id, current_user)


@router.put("/{post_id}", response_model=RecruitmentPostResponse)
async def modify_recruitment_post(
    post_id: int,
    data: RecruitmentPostUpdate,
    db: DbSession,
    current_user: CurrentUser,
) -> RecruitmentPostResponse:
    """작성자가 모집 게시글을 수정합니다 (Author edits the post)."""
    result: RecruitmentPostResponse = await recruitment_post_service.modify_post(
        db, post_id, current_user, data
    )
    await db.commit()
    return result


@router.post("/{post_id}/close", response_model=RecruitmentPostResponse)
async def close_recruitment_post(
    post_id: int,
    db: DbSession,
    current_user: CurrentUser,
) -> RecruitmentPostResponse:
    """작성자가 모집을 마감합니다 (Author closes the recruitment)."""
    result: RecruitmentPostResponse = await recruitment_post_service.close_recruitment(
        db, post_id, current_user
    )
    await db.commit()
    return result
