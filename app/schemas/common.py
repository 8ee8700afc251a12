"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared across API domains.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message response schema for simple confirmations
    (apply, cancel, close).

    Attributes:
        message: 응답 메시지 (Response message string)
    """

    message: str


class ErrorResponse(BaseModel):
    """에러 응답 스키마.

    Body rendered for every ``GlobalException``.

    Attributes:
        detail: 사람이 읽을 수 있는 메시지 (Human-readable message)
        code: 에러 코드 이름 (Error code name, e.g. "POST_NOT_FOUND")
    """

    detail: str
    code: str
