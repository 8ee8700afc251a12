"""사용자 서비스 테스트.

UserService tests: ownership gate, lookup and profile/skill updates.
"""

import pytest

from app.models.user import SiteUser
from app.schemas.user import JobSkillRequest, UserModifyProfileRequest
from app.services.user_service import user_service
from app.utils.exceptions import GlobalErrorCode, GlobalException


class TestGetUser:
    """프로필 조회 테스트."""

    async def test_get_own_profile(self, db, applicant):
        result = await user_service.get_user(db, applicant.id, applicant)
        assert result.id == applicant.id
        assert result.name == "Applicant"
        assert result.job_skills == []

    async def test_other_user_is_unauthorized(self, db, applicant, other_user):
        with pytest.raises(GlobalException) as exc_info:
            await user_service.get_user(db, other_user.id, applicant)
        assert exc_info.value.code == GlobalErrorCode.UNAUTHORIZED_USER

    async def test_unauthorized_even_if_target_missing(self, db, applicant):
        """대상이 없어도 본인이 아니면 UNAUTHORIZED_USER."""
        with pytest.raises(GlobalException) as exc_info:
            await user_service.get_user(db, 9999, applicant)
        assert exc_info.value.code == GlobalErrorCode.UNAUTHORIZED_USER

    async def test_missing_user(self, db, applicant):
        """요청자 ID가 일치하지만 사용자가 없으면 USER_NOT_FOUND."""
        ghost = SiteUser(id=9999, name="Ghost", email="ghost@test.com")
        with pytest.raises(GlobalException) as exc_info:
            await user_service.get_user(db, 9999, ghost)
        assert exc_info.value.code == GlobalErrorCode.USER_NOT_FOUND


class TestModifyUser:
    """프로필 수정 테스트."""

    async def test_modify_profile_and_skills(self, db, applicant, skills):
        request = UserModifyProfileRequest(
            introduction="Hello",
            job="Backend developer",
            job_skills=[
                JobSkillRequest(name="Python"),
                JobSkillRequest(name="Rust"),  # 존재하지 않는 스킬, 무시됨
                JobSkillRequest(name=None),
                JobSkillRequest(name="Python"),
            ],
        )
        result = await user_service.modify_user(db, applicant.id, applicant, request)
        assert result.introduction == "Hello"
        assert result.job == "Backend developer"
        assert [s.name for s in result.job_skills] == ["Python"]

    async def test_skills_replaced_not_merged(self, db, applicant, skills):
        await user_service.modify_user(db, applicant.id, applicant, UserModifyProfileRequest(
            job_skills=[JobSkillRequest(name="Python"), JobSkillRequest(name="SQL")],
        ))
        result = await user_service.modify_user(db, applicant.id, applicant, UserModifyProfileRequest(
            job_skills=[JobSkillRequest(name="Kotlin")],
        ))
        assert [s.name for s in result.job_skills] == ["Kotlin"]

    async def test_omitted_skills_are_kept(self, db, applicant, skills):
        await user_service.modify_user(db, applicant.id, applicant, UserModifyProfileRequest(
            introduction="First", job_skills=[JobSkillRequest(name="SQL")],
        ))
        result = await user_service.modify_user(db, applicant.id, applicant, UserModifyProfileRequest(
            introduction="Second",
        ))
        assert result.introduction == "Second"
        assert result.job is None
        assert [s.name for s in result.job_skills] == ["SQL"]

    async def test_modify_other_user(self, db, applicant, other_user):
        with pytest.raises(GlobalException) as exc_info:
            await user_service.modify_user(
                db, other_user.id, applicant, UserModifyProfileRequest(introduction="hack")
            )
        assert exc_info.value.code == GlobalErrorCode.UNAUTHORIZED_USER
        assert other_user.introduction is None

    async def test_modify_missing_user(self, db):
        """요청자 ID가 일치하지만 사용자가 없으면 USER_NOT_FOUND."""
        ghost = SiteUser(id=9999, name="Ghost", email="ghost@test.com")
        with pytest.raises(GlobalException) as exc_info:
            await user_service.modify_user(
                db, 9999, ghost, UserModifyProfileRequest(introduction="hello")
            )
        assert exc_info.value.code == GlobalErrorCode.USER_NOT_FOUND
