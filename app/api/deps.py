"""FastAPI 의존성 주입 모듈 — 인증된 사용자 추출.

FastAPI dependency injection module — resolves the authenticated principal.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
    2. HTTPBearer가 토큰을 추출
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
    4. 페이로드의 "sub"(사용자 ID)로 DB에서 사용자를 조회
"""

from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import SiteUser
from app.repositories.user_repository import user_repository
from app.utils.jwt import decode_token

security: HTTPBearer = HTTPBearer()


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SiteUser:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer token and return the authenticated SiteUser.

    Raises:
        HTTPException(401): 토큰이 유효하지 않거나 만료됨, 또는 사용자 없음
                            (Invalid/expired token or unknown user)
    """
    try:
        payload: dict = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")
        user_id: int = int(payload["sub"])
    except HTTPException:
        raise
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

    user: SiteUser | None = await user_repository.find_by_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    return user


CurrentUser = Annotated[SiteUser, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
