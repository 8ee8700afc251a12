"""게시글 및 모집 게시글 SQLAlchemy ORM 모델 정의.

Post and RecruitmentPost ORM model definitions.
Uses single-table inheritance: every post lives in ``posts`` and the
``post_type`` discriminator marks recruitment posts, whose extra columns are
nullable for plain posts.

Tables:
    - categories: 게시판 카테고리 (Board categories)
    - posts: 게시글 + 모집 게시글 (Posts and recruitment posts)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.job_posting import JobPosting
from app.models.user import SiteUser


class RecruitmentStatus(str, enum.Enum):
    """모집 게시글 상태 — OPEN에서 CLOSED 방향으로만 전이.

    Post-level recruitment lifecycle. Only OPEN → CLOSED is allowed.
    """

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class Category(Base):
    """게시판 카테고리 모델 (Board category)."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)


class Post(Base):
    """게시글 모델 — 제목, 본문, 작성자, 카테고리.

    Content post. A post never exists without an author and a category.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        subject: 제목 (Title)
        content: 본문 (Body)
        author_id: 작성자 FK (Author foreign key, required)
        category_id: 카테고리 FK (Category foreign key, required)
        post_type: 상속 구분자 (Inheritance discriminator)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(Integer, ForeignKey("site_users.id", ondelete="CASCADE"), nullable=False)
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("categories.id"), nullable=False)
    post_type: Mapped[str] = mapped_column(String(30), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 다대일 관계는 항상 함께 쓰이므로 joined 로딩
    author: Mapped[SiteUser] = relationship(lazy="joined")
    category: Mapped[Category] = relationship(lazy="joined")

    __mapper_args__ = {
        "polymorphic_on": "post_type",
        "polymorphic_identity": "post",
    }

    def update_post(self, subject: str, content: str) -> None:
        self.subject = subject
        self.content = content


class RecruitmentPost(Post):
    """모집 게시글 모델 — 마감일, 모집 인원, 모집 상태, 연결된 채용 공고.

    Recruitment post: a post inviting applications, with a closing date,
    applicant capacity, recruitment status and an optional job posting.
    """

    recruitment_closing_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    num_of_applicants: Mapped[int | None] = mapped_column(Integer, nullable=True)
    recruitment_status: Mapped[RecruitmentStatus | None] = mapped_column(
        Enum(RecruitmentStatus, native_enum=False, length=20), nullable=True
    )
    job_posting_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("job_postings.id"), nullable=True)

    job_posting: Mapped[JobPosting | None] = relationship(lazy="joined")

    __mapper_args__ = {"polymorphic_identity": "recruitment"}

    @property
    def is_closed(self) -> bool:
        return self.recruitment_status == RecruitmentStatus.CLOSED

    def is_past_closing_date(self, now: datetime) -> bool:
        """마감일이 지났는지 확인합니다. 마감일이 없으면 False.

        Naive closing dates (SQLite) are read as UTC.
        """
        closing_date = self.recruitment_closing_date
        if closing_date is None:
            return False
        if closing_date.tzinfo is None:
            closing_date = closing_date.replace(tzinfo=timezone.utc)
        return closing_date <= now

    def update_post(self, subject: str, content: str, num_of_applicants: int | None = None) -> None:
        super().update_post(subject, content)
        self.num_of_applicants = num_of_applicants

    def update_recruitment_status(self, recruitment_status: RecruitmentStatus) -> None:
        """모집 상태를 변경합니다. CLOSED 이후에는 되돌릴 수 없습니다.

        Change the recruitment status. A closed post stays closed.

        Raises:
            ValueError: CLOSED 게시글을 다시 여는 경우 (Reopening a closed post)
        """
        if self.is_closed and recruitment_status != RecruitmentStatus.CLOSED:
            raise ValueError("A closed recruitment post cannot be reopened")
        self.recruitment_status = recruitment_status
