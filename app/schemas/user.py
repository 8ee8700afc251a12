"""사용자 프로필 관련 Pydantic 요청/응답 스키마 정의.

User profile Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel

from app.schemas.job_posting import JobSkillResponse


class JobSkillRequest(BaseModel):
    """스킬 지정 요청 — 이름으로 기존 스킬을 참조.

    Skill reference by name. Unknown or empty names are dropped.
    """

    name: str | None = None


class UserModifyProfileRequest(BaseModel):
    """프로필 수정 요청 스키마.

    Profile update request schema.
    ``introduction`` and ``job`` are always overwritten; ``job_skills`` is
    only applied when present, replacing the whole skill set.

    Attributes:
        introduction: 자기소개 (Introduction, null clears it)
        job: 직업 (Job, null clears it)
        job_skills: 스킬 목록, 생략 시 유지 (Skills; omitted keeps the current set)
    """

    introduction: str | None = None
    job: str | None = None
    job_skills: list[JobSkillRequest] | None = None


class UserResponse(BaseModel):
    """사용자 프로필 응답 스키마.

    User profile response schema.

    Attributes:
        id: 사용자 ID (User ID)
        name: 이름 (Display name)
        email: 이메일 (Email address)
        introduction: 자기소개 (Introduction, nullable)
        job: 직업 (Job, nullable)
        job_skills: 보유 스킬 (Skills)
        created_at: 가입 일시 (Account creation timestamp)
    """

    id: int
    name: str
    email: str
    introduction: str | None
    job: str | None
    job_skills: list[JobSkillResponse]
    created_at: datetime
