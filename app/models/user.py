"""사용자 및 직무 스킬 SQLAlchemy ORM 모델 정의.

SiteUser and JobSkill SQLAlchemy ORM model definitions.

Tables:
    - site_users: 사이트 사용자 계정 및 프로필 (Site accounts with profile fields)
    - job_skills: 직무 스킬 마스터 (Job skill master data)
    - user_job_skills: 사용자-스킬 매핑 (User ↔ skill association)
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

# 사용자-스킬 다대다 매핑 테이블 — User ↔ JobSkill association table
user_job_skills: Table = Table(
    "user_job_skills",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("site_users.id", ondelete="CASCADE"), primary_key=True),
    Column("job_skill_id", Integer, ForeignKey("job_skills.id", ondelete="CASCADE"), primary_key=True),
)


class JobSkill(Base):
    """직무 스킬 모델 — 이름으로 조회되는 스킬 마스터.

    Job skill master record, resolved by its unique name.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 스킬 이름 (Skill name, unique)
        code: 외부 코드 (External skill code, optional)
    """

    __tablename__ = "job_skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    code: Mapped[int | None] = mapped_column(Integer, nullable=True)


class SiteUser(Base):
    """사이트 사용자 모델 — 계정 및 프로필 정보.

    Site user model — account holder with profile fields and a skill set.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 표시 이름 (Display name)
        email: 이메일 (Email address, unique)
        introduction: 자기소개 (Free-text introduction, optional)
        job: 직업 (Current job, optional)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        job_skills: 보유 스킬 목록 (Skills, eagerly loaded with selectin)
    """

    __tablename__ = "site_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    introduction: Mapped[str | None] = mapped_column(Text, nullable=True)
    job: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 비동기 세션에서 지연 로딩이 불가하므로 selectin 사용
    job_skills: Mapped[list[JobSkill]] = relationship(secondary=user_job_skills, lazy="selectin")

    def modify_profile(self, introduction: str | None, job: str | None) -> None:
        """자기소개와 직업을 덮어씁니다 (Overwrite introduction and job)."""
        self.introduction = introduction
        self.job = job

    def update_job_skills(self, skills: list[JobSkill]) -> None:
        """스킬 목록을 통째로 교체합니다 (Replace the whole skill set)."""
        self.job_skills = list(skills)
