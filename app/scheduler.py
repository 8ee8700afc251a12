"""마감일 지난 모집 게시글 자동 마감 작업.

Background sweep that closes OPEN recruitment posts past their closing
date. Started from the application lifespan in ``app.main``.
"""

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import async_session
from app.services.recruitment_post_service import recruitment_post_service

logger = logging.getLogger(__name__)


async def sweep_expired_posts(
    session_factory: async_sessionmaker[AsyncSession] = async_session,
) -> int:
    """마감일이 지난 게시글을 한 번 마감 처리하고 커밋합니다.

    Returns:
        int: 마감 처리된 게시글 수 (Number of posts closed)
    """
    async with session_factory() as db:
        closed: int = await recruitment_post_service.close_expired_posts(db)
        await db.commit()
    return closed


async def run_expired_post_sweeper(
    interval_seconds: int,
    session_factory: async_sessionmaker[AsyncSession] = async_session,
) -> None:
    """``interval_seconds`` 간격으로 마감 작업을 반복합니다. 취소될 때까지 실행."""
    while True:
        try:
            closed = await sweep_expired_posts(session_factory)
            if closed:
                logger.info("Closed %d expired recruitment posts", closed)
        except SQLAlchemyError:
            logger.exception("Expired post sweep failed")
        await asyncio.sleep(interval_seconds)
