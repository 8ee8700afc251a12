"""게시글 및 모집 신청 관련 Pydantic 요청/응답 스키마 정의.

Post, recruitment post and recruitment application schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.post import RecruitmentStatus
from app.models.recruitment_user import RecruitmentUserStatus
from app.utils.pagination import Page


class PostPageResponse(BaseModel):
    """게시글 목록 항목 응답 (Post list item)."""

    id: int
    subject: str
    category_name: str
    author_id: int
    author_name: str
    created_at: datetime


class RecruitmentUserPostResponse(BaseModel):
    """상태별 신청 게시글 목록 응답.

    Posts where the requester holds an application of ``status``.

    Attributes:
        status: 조회한 신청 상태 (Application status queried)
        posts: 게시글 페이지 (Page of posts)
    """

    status: RecruitmentUserStatus
    posts: Page[PostPageResponse]


class RecruitmentPostResponse(BaseModel):
    """모집 게시글 상세 응답.

    Recruitment post detail, personalised for the requester.

    Attributes:
        is_author: 요청자가 작성자인지 (Whether the requester wrote the post)
        my_recruitment_status: 요청자의 신청 상태, 미신청이면 null
                               (Requester's application status, null when not applied)
        accepted_count: 승인된 신청 수 (Number of accepted applications)
    """

    id: int
    subject: str
    content: str
    category_name: str
    author_id: int
    author_name: str
    recruitment_closing_date: datetime | None
    num_of_applicants: int | None
    recruitment_status: RecruitmentStatus | None
    job_posting_id: int | None
    job_posting_subject: str | None
    is_author: bool
    my_recruitment_status: RecruitmentUserStatus | None
    accepted_count: int
    created_at: datetime


class RecruitmentPostUpdate(BaseModel):
    """모집 게시글 수정 요청 (Recruitment post update request)."""

    subject: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    num_of_applicants: int | None = Field(default=None, ge=1)


class RecruitmentStatusChange(BaseModel):
    """신청 상태 변경 요청 — ACCEPTED 또는 REJECTED.

    Author decision on one application. Parsed by the service so unknown
    values map to ``RECRUITMENT_STATUS_NOT_SUPPORT``.
    """

    status: str
