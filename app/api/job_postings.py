"""채용 공고 라우터 — 검색 및 상세 조회 API.

Job Posting Router — search and detail. Public, no authentication.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import DbSession
from app.schemas.job_posting import JobPostingResponse, JobPostingSearchCondition
from app.services.job_posting_service import job_posting_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page[JobPostingResponse])
async def search_job_postings(
    condition: Annotated[JobPostingSearchCondition, Query()],
    db: DbSession,
) -> Page[JobPostingResponse]:
    """검색 조건으로 채용 공고를 조회합니다.

    Query parameters map to ``JobPostingSearchCondition`` fields.
    """
    return await job_posting_service.search(db, condition)


@router.get("/{job_id}", response_model=JobPostingResponse)
async def get_job_posting(
    job_id: int,
    db: DbSession,
) -> JobPostingResponse:
    return await job_posting_service.get_job_posting(db, job_id)
