"""직무 스킬 레포지토리.

Job Skill Repository — resolves skills by name.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import JobSkill
from app.repositories.base import BaseRepository


class JobSkillRepository(BaseRepository[JobSkill]):
    """job_skills 테이블 레포지토리 (Repository for the job_skills table)."""

    def __init__(self) -> None:
        super().__init__(JobSkill)

    async def find_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> JobSkill | None:
        """이름으로 스킬을 조회합니다 (Find a skill by its exact name)."""
        result = await db.execute(select(JobSkill).where(JobSkill.name == name))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
job_skill_repository: JobSkillRepository = JobSkillRepository()
