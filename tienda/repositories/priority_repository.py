"""우선순위 레포지토리.

Priority repository — CRUD queries for priority levels.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from tienda.models.enums import PriorityLevel
from tienda.models.priority import Priority
from tienda.repositories.base import BaseRepository


class PriorityRepository(BaseRepository[Priority]):

    def __init__(self) -> None:
        super().__init__(Priority)

    async def get_by_level(
        self,
        db: AsyncSession,
        level: PriorityLevel,
    ) -> Priority | None:
        """단계로 우선순위를 조회합니다 (Retrieve a priority by its level)."""
        query: Select = select(Priority).where(Priority.level == level)
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
priority_repository: PriorityRepository = PriorityRepository()
