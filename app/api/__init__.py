"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router for
inclusion in the FastAPI application.

Included routers:
    - users: 본인 프로필, 내 신청 게시글 (Own profile, my applied posts)
    - recruitment: 모집 신청/취소/결정 (Apply, cancel, decide)
    - recruitment_posts: 모집 게시글 상세/수정/마감 (Post detail, edit, close)
    - job_postings: 채용 공고 검색 (Job posting search)
"""

from fastapi import APIRouter

from app.api.job_postings import router as job_postings_router
from app.api.recruitment import router as recruitment_router
from app.api.recruitment_posts import router as recruitment_posts_router
from app.api.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["Users"])
# 신청 엔드포인트는 게시글 하위 리소스: /posts/{post_id}/recruitment
api_router.include_router(recruitment_router, prefix="/posts", tags=["Recruitment"])
api_router.include_router(recruitment_posts_router, prefix="/recruitment-posts", tags=["Recruitment Posts"])
api_router.include_router(job_postings_router, prefix="/job-postings", tags=["Job Postings"])
