"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata, which
Alembic migrations and relationship resolution rely on.

Modules:
    user: 사이트 사용자 및 직무 스킬 (SiteUser, JobSkill)
    job_posting: 채용 공고 (JobPosting)
    post: 카테고리, 게시글, 모집 게시글 (Category, Post, RecruitmentPost)
    recruitment_user: 모집 신청 (RecruitmentUser)
"""

from app.models.user import JobSkill, SiteUser
from app.models.job_posting import JobPosting
from app.models.post import Category, Post, RecruitmentPost, RecruitmentStatus
from app.models.recruitment_user import RecruitmentUser, RecruitmentUserStatus

__all__ = [
    "JobSkill", "SiteUser",
    "JobPosting",
    "Category", "Post", "RecruitmentPost", "RecruitmentStatus",
    "RecruitmentUser", "RecruitmentUserStatus",
]
