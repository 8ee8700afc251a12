"""전역 에러 코드 및 예외 모듈.

Global error codes and the single tagged exception raised by services.
Every business failure is a ``GlobalException`` carrying one
``GlobalErrorCode``; the HTTP status and default message travel with the code
so call sites never repeat them.

Usage:
    from app.utils.exceptions import GlobalErrorCode, GlobalException
    raise GlobalException(GlobalErrorCode.POST_NOT_FOUND)
"""

from enum import Enum

from fastapi import HTTPException, status


class GlobalErrorCode(Enum):
    """에러 코드 — (HTTP 상태 코드, 기본 메시지) 쌍.

    Closed set of error codes. Each member's value is a
    ``(http_status, message)`` pair.
    """

    # 사용자 — User
    USER_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "User not found")
    UNAUTHORIZED_USER = (status.HTTP_403_FORBIDDEN, "Not allowed to access another user's profile")

    # 게시글 — Post
    POST_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Post not found")
    POST_NOT_AUTHOR = (status.HTTP_403_FORBIDDEN, "Only the author can manage this post")

    # 모집 신청 — Recruitment application
    RECRUITMENT_CLOSED = (status.HTTP_400_BAD_REQUEST, "Recruitment is closed")
    ALREADY_RECRUITMENT = (status.HTTP_409_CONFLICT, "Already applied to this recruitment")
    RECRUITMENT_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Recruitment application not found")
    RECRUITMENT_STATUS_NOT_SUPPORT = (status.HTTP_400_BAD_REQUEST, "Unsupported recruitment status")
    INVALID_RECRUITMENT_TRANSITION = (status.HTTP_409_CONFLICT, "Application has already been decided")

    # 채용 공고 — Job posting
    JOB_POSTING_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Job posting not found")

    @property
    def http_status(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class GlobalException(HTTPException):
    """에러 코드를 담는 단일 예외.

    Tagged exception raised by services. Propagates unchanged to the web
    layer, where ``app.main`` renders it as ``{"detail", "code"}``.

    Args:
        code: 에러 코드 (Error code)
        detail: 메시지 재정의, 없으면 코드의 기본 메시지 사용
                (Optional message override; defaults to the code's message)
    """

    def __init__(self, code: GlobalErrorCode, detail: str | None = None) -> None:
        super().__init__(status_code=code.http_status, detail=detail or code.message)
        self.code: GlobalErrorCode = code

    def __repr__(self) -> str:
        return f"GlobalException(code={self.code.name}, detail={self.detail!r})"
