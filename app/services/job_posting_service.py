"""채용 공고 서비스 — 공고 검색 및 상세 조회.

Job Posting Service — search and detail lookup over job listings.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.job_posting import JobPosting
from app.repositories.job_posting_repository import JobPostingRepository, job_posting_repository
from app.schemas.job_posting import JobPostingResponse, JobPostingSearchCondition, JobSkillResponse
from app.utils.exceptions import GlobalErrorCode, GlobalException
from app.utils.pagination import Page, build_page


class JobPostingService:
    """채용 공고 조회 서비스 (Job posting read service)."""

    def __init__(self, job_posting_repo: JobPostingRepository = job_posting_repository) -> None:
        self.job_posting_repo = job_posting_repo

    def _to_response(self, job: JobPosting) -> JobPostingResponse:
        return JobPostingResponse(
            id=job.id,
            subject=job.subject,
            url=job.url,
            company_name=job.company_name,
            company_link=job.company_link,
            posted_date=job.posted_date,
            open_date=job.open_date,
            close_date=job.close_date,
            experience_level=job.experience_level_name,
            require_education=job.require_educate_name,
            salary=job.salary_name,
            apply_cnt=job.apply_cnt,
            job_skills=[JobSkillResponse(name=s.name, code=s.code) for s in job.job_skills],
        )

    async def search(
        self,
        db: AsyncSession,
        condition: JobPostingSearchCondition,
    ) -> Page[JobPostingResponse]:
        """검색 조건으로 공고 목록을 조회합니다.

        Search job postings by keyword, salary, experience and education.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            Page[JobPostingResponse]: 공고 페이지 (Page of job postings)
        """
        jobs, total = await self.job_posting_repo.search(db, condition)
        return build_page(
            JobPostingResponse,
            [self._to_response(j) for j in jobs],
            total,
            condition.page_num,
            condition.page_size,
        )

    async def get_job_posting(self, db: AsyncSession, job_id: int) -> JobPostingResponse:
        """공고 상세를 조회합니다. 없으면 JOB_POSTING_NOT_FOUND."""
        job: JobPosting | None = await self.job_posting_repo.get_by_id(db, job_id)
        if job is None:
            raise GlobalException(GlobalErrorCode.JOB_POSTING_NOT_FOUND)
        return self._to_response(job)


# 싱글턴 인스턴스 — Singleton instance
job_posting_service: JobPostingService = JobPostingService()
