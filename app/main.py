"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 처리, 라우터 등록.

FastAPI application entry point — middleware, error mapping and routers.
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import api_router
from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.scheduler import run_expired_post_sweeper
from app.schemas.common import ErrorResponse
from app.utils.exceptions import GlobalException


@asynccontextmanager
async def lifespan(app: FastAPI):
    """마감일이 지난 게시글 자동 마감 작업을 시작하고, 종료 시 취소합니다."""
    sweeper: asyncio.Task | None = None
    if settings.EXPIRED_POST_SWEEP_SECONDS > 0:
        sweeper = asyncio.create_task(run_expired_post_sweeper(settings.EXPIRED_POST_SWEEP_SECONDS))
    yield
    if sweeper is not None:
        sweeper.cancel()
        try:
            await sweeper
        except asyncio.CancelledError:
            pass


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
app.add_middleware(AxiomLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GlobalException)
async def global_exception_handler(request: Request, exc: GlobalException) -> JSONResponse:
    """서비스 예외를 에러 코드가 포함된 JSON 응답으로 변환합니다.

    Render a ``GlobalException`` as ``{"detail": ..., "code": ...}``.
    """
    body: ErrorResponse = ErrorResponse(detail=str(exc.detail), code=exc.code.name)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트 (Health check for load balancers)."""
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")
