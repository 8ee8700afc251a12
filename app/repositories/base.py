"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Every method takes the caller's ``AsyncSession`` explicitly; repositories
flush but never commit, leaving the transaction boundary to the caller.

Usage:
    class JobSkillRepository(BaseRepository[JobSkill]):
        def __init__(self) -> None:
            super().__init__(JobSkill)
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic repository providing lookup, paging, save and delete.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.unique().scalar_one_or_none()

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Run ``query`` for one page and return the items with the total count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 기본 SELECT 쿼리 (Base SELECT query)
            page: 현재 페이지 번호, 1부터 시작 (Current page number, 1-based)
            per_page: 페이지당 레코드 수 (Number of records per page)

        Returns:
            tuple[Sequence[ModelType], int]: (레코드 목록, 전체 개수)
        """
        count_query: Select = select(func.count()).select_from(query.order_by(None).subquery())
        total: int = (await db.execute(count_query)).scalar() or 0

        offset: int = (page - 1) * per_page
        result = await db.execute(query.offset(offset).limit(per_page))
        items: Sequence[ModelType] = result.unique().scalars().all()

        return items, total

    async def save(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> ModelType:
        """엔티티를 세션에 추가하고 flush 합니다.

        Add the entity to the session, flush, and refresh generated columns.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 저장할 엔티티 (Entity to persist)

        Returns:
            ModelType: 저장된 엔티티 (The persisted entity)
        """
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> None:
        """엔티티를 삭제합니다 (Hard-delete an entity)."""
        await db.delete(db_obj)
        await db.flush()
