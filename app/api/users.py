"""사용자 라우터 — 본인 프로필 및 신청 게시글 조회 API.

User Router — profile read/update and the posts the current user applied to.
Follows 3-layer architecture: Router → Service → Repository.
"""

from fastapi import APIRouter, Query

from app.api.deps import CurrentUser, DbSession
from app.config import settings
from app.schemas.post import RecruitmentUserPostResponse
from app.schemas.user import UserModifyProfileRequest, UserResponse
from app.services.recruitment_user_service import recruitment_user_service
from app.services.user_service import user_service

router: APIRouter = APIRouter()


@router.get("/me/recruitment-posts", response_model=RecruitmentUserPostResponse)
async def get_my_recruitment_posts(
    db: DbSession,
    current_user: CurrentUser,
    status: str = Query(default="ACCEPTED"),
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> RecruitmentUserPostResponse:
    """신청 상태별 내 모집 게시글 목록을 조회합니다.

    List posts where the current user holds an application of ``status``
    (default ACCEPTED).
    """
    return await recruitment_user_service.get_accepted_posts(
        db, current_user, status, page, per_page
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    db: DbSession,
    current_user: CurrentUser,
) -> UserResponse:
    """본인 프로필을 조회합니다 (Get own profile)."""
    return await user_service.get_user(db, user_id, current_user)


@router.put("/{user_id}", response_model=UserResponse)
async def modify_user(
    user_id: int,
    data: UserModifyProfileRequest,
    db: DbSession,
    current_user: CurrentUser,
) -> UserResponse:
    """본인 프로필을 수정합니다.

    Update own profile: introduction, job and skill set.
    """
    result: UserResponse = await user_service.modify_user(db, user_id, current_user, data)
    await db.commit()
    return result
