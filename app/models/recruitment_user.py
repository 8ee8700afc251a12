"""모집 신청 SQLAlchemy ORM 모델 정의.

RecruitmentUser ORM model — one user's application to one recruitment post.

Tables:
    - recruitment_users: 모집 신청 (Applications, hard-deleted on cancel)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.post import RecruitmentPost
from app.models.user import SiteUser


class RecruitmentUserStatus(str, enum.Enum):
    """신청 상태 — APPLIED → ACCEPTED | REJECTED.

    Application status of a single user for a single post.
    """

    APPLIED = "APPLIED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"

    @classmethod
    def from_value(cls, value: str | None) -> "RecruitmentUserStatus | None":
        """문자열을 상태로 변환합니다. 알 수 없는 값이면 None.

        Parse a status string case-insensitively; returns None when unknown.
        """
        if value is None:
            return None
        return cls.__members__.get(value.strip().upper())


class RecruitmentUser(Base):
    """모집 신청 모델.

    Links one recruitment post and one user with an application status.
    At most one record per (post, user) pair, enforced by the service layer.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        post_id: 모집 게시글 FK (Recruitment post foreign key)
        user_id: 신청자 FK (Applicant foreign key)
        status: 신청 상태 (Application status)
        created_at: 신청 일시 UTC (Application timestamp)
    """

    __tablename__ = "recruitment_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("site_users.id", ondelete="CASCADE"), nullable=False, index=True)
    status: Mapped[RecruitmentUserStatus] = mapped_column(
        Enum(RecruitmentUserStatus, native_enum=False, length=20), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    post: Mapped[RecruitmentPost] = relationship()
    user: Mapped[SiteUser] = relationship()

    def update_status(self, status: RecruitmentUserStatus) -> None:
        self.status = status
