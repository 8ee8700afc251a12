"""채용 공고 검색 조건 및 응답 Pydantic 스키마.

Job posting search condition and response schemas.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class JobPostingSearchCondition(BaseModel):
    """채용 공고 검색 조건.

    Search condition for job postings.

    Attributes:
        salary_code: 연봉 코드 (Salary code filter)
        kw: 키워드 — 제목/회사명 부분 일치 (Keyword matched against subject and company)
        experience_level: 경력 코드 (Experience level code filter)
        require_educate_code: 학력 코드 (Required education code filter)
        sort: 정렬 필드 (Sort field)
        order: 정렬 방향 (Sort direction)
        page_num: 페이지 번호, 1부터 시작 (Page number, 1-based)
        page_size: 페이지 크기 (Page size)
    """

    salary_code: int | None = None
    kw: str | None = None
    experience_level: int | None = None
    require_educate_code: int | None = None
    sort: Literal["id", "posted_date", "close_date", "apply_cnt"] = "id"
    order: Literal["asc", "desc"] = "desc"
    page_num: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)


class JobSkillResponse(BaseModel):
    """직무 스킬 응답 (Job skill response)."""

    name: str
    code: int | None = None


class JobPostingResponse(BaseModel):
    """채용 공고 응답 스키마 (Job posting response)."""

    id: int
    subject: str
    url: str | None
    company_name: str
    company_link: str | None
    posted_date: datetime | None
    open_date: datetime | None
    close_date: datetime | None
    experience_level: str | None
    require_education: str | None
    salary: str | None
    apply_cnt: int
    job_skills: list[JobSkillResponse]

