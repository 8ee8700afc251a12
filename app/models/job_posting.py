"""채용 공고 SQLAlchemy ORM 모델 정의.

JobPosting ORM model — external job listings that recruitment posts refer to.

Tables:
    - job_postings: 채용 공고 (Job listings)
    - job_posting_skills: 공고-스킬 매핑 (Posting ↔ skill association)
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.user import JobSkill

job_posting_skills: Table = Table(
    "job_posting_skills",
    Base.metadata,
    Column("job_posting_id", Integer, ForeignKey("job_postings.id", ondelete="CASCADE"), primary_key=True),
    Column("job_skill_id", Integer, ForeignKey("job_skills.id", ondelete="CASCADE"), primary_key=True),
)


class JobPosting(Base):
    """채용 공고 모델.

    Job posting model. Code/name pairs (experience level, education,
    salary) mirror the codes used by the listing provider and are the
    filter keys of ``JobPostingSearchCondition``.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        subject: 공고 제목 (Posting title)
        url: 원문 링크 (Source URL)
        company_name: 회사명 (Company name)
        company_link: 회사 링크 (Company URL)
        posted_date: 게시일 (Posting date)
        open_date: 접수 시작일 (Application open date)
        close_date: 마감일 (Application close date)
        experience_level_code / experience_level_name: 경력 코드/이름
        require_educate_code / require_educate_name: 학력 코드/이름
        salary_code / salary_name: 연봉 코드/이름
        apply_cnt: 지원자 수 (Applicant count)
    """

    __tablename__ = "job_postings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    posted_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    open_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    close_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    experience_level_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    experience_level_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    require_educate_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    require_educate_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    salary_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    salary_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    apply_cnt: Mapped[int] = mapped_column(Integer, default=0)

    job_skills: Mapped[list[JobSkill]] = relationship(secondary=job_posting_skills, lazy="selectin")
