"""사용자 서비스 — 본인 확인 후 프로필 조회/수정 비즈니스 로직.

User Service — ownership-gated profile read and update.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import JobSkill, SiteUser
from app.repositories.job_skill_repository import JobSkillRepository, job_skill_repository
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.job_posting import JobSkillResponse
from app.schemas.user import UserModifyProfileRequest, UserResponse
from app.utils.exceptions import GlobalErrorCode, GlobalException


class UserService:
    """사용자 프로필 비즈니스 로직을 처리하는 서비스.

    Service handling profile reads and updates. Every operation first checks
    that the requester is the target user.
    """

    def __init__(
        self,
        user_repo: UserRepository = user_repository,
        job_skill_repo: JobSkillRepository = job_skill_repository,
    ) -> None:
        self.user_repo = user_repo
        self.job_skill_repo = job_skill_repo

    def _to_response(self, user: SiteUser) -> UserResponse:
        """사용자 모델을 응답 스키마로 변환합니다 (Convert a SiteUser to UserResponse)."""
        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            introduction=user.introduction,
            job=user.job,
            job_skills=[JobSkillResponse(name=s.name, code=s.code) for s in user.job_skills],
            created_at=user.created_at,
        )

    def is_valid_user(self, user_id: int, requester: SiteUser) -> None:
        """요청자가 대상 사용자 본인인지 확인합니다.

        Raises:
            GlobalException(UNAUTHORIZED_USER): 본인이 아님 (Requester is someone else)
        """
        if user_id != requester.id:
            raise GlobalException(GlobalErrorCode.UNAUTHORIZED_USER)

    async def get_user_by_id(self, db: AsyncSession, user_id: int) -> SiteUser:
        """ID로 사용자를 조회합니다. 없으면 USER_NOT_FOUND."""
        user: SiteUser | None = await self.user_repo.find_by_id(db, user_id)
        if user is None:
            raise GlobalException(GlobalErrorCode.USER_NOT_FOUND)
        return user

    async def get_user(
        self,
        db: AsyncSession,
        user_id: int,
        requester: SiteUser,
    ) -> UserResponse:
        """본인 프로필을 조회합니다.

        Retrieve the profile of ``user_id``; only the user themself may.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 대상 사용자 ID (Target user ID)
            requester: 인증된 요청자 (Authenticated requester)

        Returns:
            UserResponse: 프로필 응답 (Profile response)

        Raises:
            GlobalException(UNAUTHORIZED_USER): 본인이 아님, 존재 여부와 무관
            GlobalException(USER_NOT_FOUND): 사용자 없음
        """
        self.is_valid_user(user_id, requester)

        user: SiteUser = await self.get_user_by_id(db, user_id)
        return self._to_response(user)

    async def modify_user(
        self,
        db: AsyncSession,
        user_id: int,
        requester: SiteUser,
        request: UserModifyProfileRequest,
    ) -> UserResponse:
        """본인 프로필을 수정합니다.

        Update the profile of ``user_id``. When ``job_skills`` is given, each
        name is resolved to an existing skill (unknown names are dropped) and
        the skill set is replaced. Introduction and job are always
        overwritten.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 대상 사용자 ID (Target user ID)
            requester: 인증된 요청자 (Authenticated requester)
            request: 수정 요청 (Profile update request)

        Returns:
            UserResponse: 수정된 프로필 (Updated profile)
        """
        self.is_valid_user(user_id, requester)

        user: SiteUser = await self.get_user_by_id(db, user_id)

        if request.job_skills is not None:
            skills: list[JobSkill] = []
            for skill_request in request.job_skills:
                if not skill_request.name:
                    continue
                skill = await self.job_skill_repo.find_by_name(db, skill_request.name)
                if skill is not None and skill not in skills:
                    skills.append(skill)
            user.update_job_skills(skills)

        user.modify_profile(request.introduction, request.job)

        await db.flush()
        return self._to_response(user)


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
