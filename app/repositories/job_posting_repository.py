"""채용 공고 레포지토리 — 검색 조건 기반 필터링/정렬/페이지네이션.

Job Posting Repository — filtering, sorting and paging driven by
``JobPostingSearchCondition``.
"""

from typing import Sequence

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.job_posting import JobPosting
from app.repositories.base import BaseRepository
from app.schemas.job_posting import JobPostingSearchCondition

# 허용된 정렬 필드 — Whitelisted sort columns
_SORT_COLUMNS = {
    "id": JobPosting.id,
    "posted_date": JobPosting.posted_date,
    "close_date": JobPosting.close_date,
    "apply_cnt": JobPosting.apply_cnt,
}


class JobPostingRepository(BaseRepository[JobPosting]):
    """job_postings 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(JobPosting)

    def _build_query(self, condition: JobPostingSearchCondition) -> Select:
        query: Select = select(JobPosting)

        if condition.kw:
            kw: str = condition.kw.strip()
            # %, _ 는 와일드카드가 아닌 문자 그대로 검색
            query = query.where(
                or_(
                    JobPosting.subject.icontains(kw, autoescape=True),
                    JobPosting.company_name.icontains(kw, autoescape=True),
                )
            )
        if condition.salary_code is not None:
            query = query.where(JobPosting.salary_code == condition.salary_code)
        if condition.experience_level is not None:
            query = query.where(JobPosting.experience_level_code == condition.experience_level)
        if condition.require_educate_code is not None:
            query = query.where(JobPosting.require_educate_code == condition.require_educate_code)

        column = _SORT_COLUMNS[condition.sort]
        ordering = column.asc() if condition.order == "asc" else column.desc()
        # 동일 값 정렬 안정화를 위해 id를 보조 키로 사용
        return query.order_by(ordering, JobPosting.id.desc())

    async def search(
        self,
        db: AsyncSession,
        condition: JobPostingSearchCondition,
    ) -> tuple[Sequence[JobPosting], int]:
        """검색 조건에 맞는 공고를 페이지 단위로 조회합니다.

        Search job postings by keyword and code filters, one page at a time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            tuple[Sequence[JobPosting], int]: (공고 목록, 전체 개수)
        """
        return await self.get_paginated(
            db, self._build_query(condition), condition.page_num, condition.page_size
        )


# 싱글턴 인스턴스 — Singleton instance
job_posting_repository: JobPostingRepository = JobPostingRepository()
