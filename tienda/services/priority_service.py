"""우선순위 서비스 — 우선순위 CRUD 비즈니스 로직.

Priority Service — Business logic for priority CRUD operations.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tienda.models.enums import PriorityLevel
from tienda.models.priority import Priority
from tienda.repositories.order_repository import order_repository
from tienda.repositories.priority_repository import priority_repository
from tienda.schemas.envelope import ResponseEnvelope
from tienda.schemas.priority import PriorityCreate, PriorityResponse, PriorityUpdate
from tienda.utils.clock import next_modification, utc_now
from tienda.utils.exceptions import ConflictError, DuplicateError, NotFoundError


class PriorityService:
    """우선순위 관련 비즈니스 로직을 처리하는 서비스.

    Service handling priority business logic. Each level exists at most once.
    """

    def _to_response(self, priority: Priority) -> PriorityResponse:
        return PriorityResponse(
            id=str(priority.id),
            level=priority.level,
            description=priority.description,
            created_at=priority.created_at,
            updated_at=priority.updated_at,
        )

    async def _get_or_raise(self, db: AsyncSession, priority_id: UUID) -> Priority:
        priority: Priority | None = await priority_repository.get_by_id(db, priority_id)
        if priority is None:
            raise NotFoundError("Priority not found")
        return priority

    async def _ensure_level_available(
        self,
        db: AsyncSession,
        level: PriorityLevel,
        priority_id: UUID | None = None,
    ) -> None:
        existing: Priority | None = await priority_repository.get_by_level(db, level)
        if existing is not None and existing.id != priority_id:
            raise DuplicateError(f"Priority level {level.value} already exists")

    async def create_priority(self, db: AsyncSession, data: PriorityCreate) -> ResponseEnvelope:
        """새 우선순위를 생성합니다.

        Create a new priority level.

        Returns:
            ResponseEnvelope: 201 + 생성된 우선순위, 단계 중복 시 409
                              (201 with the created priority, 409 on duplicate level)
        """
        try:
            await self._ensure_level_available(db, data.level)
            now: datetime = utc_now()
            priority: Priority = await priority_repository.create(
                db,
                {
                    "level": data.level,
                    "description": data.description,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            return ResponseEnvelope.success(201, "Priority created successfully", self._to_response(priority))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error creating priority", exc)

    async def update_priority(
        self,
        db: AsyncSession,
        priority_id: UUID,
        data: PriorityUpdate,
    ) -> ResponseEnvelope:
        """우선순위의 단계와 설명을 교체합니다.

        Replace the level and description of a priority and refresh its
        modification timestamp.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            priority_id: 우선순위 ID (Priority UUID)
            data: 수정 데이터 (Replacement data)

        Returns:
            ResponseEnvelope: 200 + 수정된 우선순위, 없으면 404, 단계 중복 시 409
                              (200 with the updated priority, 404 if absent, 409 on duplicate level)
        """
        try:
            priority: Priority = await self._get_or_raise(db, priority_id)
            await self._ensure_level_available(db, data.level, priority_id)

            priority.level = data.level
            priority.description = data.description
            priority.updated_at = next_modification(priority.updated_at)

            priority = await priority_repository.save(db, priority)
            return ResponseEnvelope.success(200, "Priority updated successfully", self._to_response(priority))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error updating priority", exc)

    async def list_priorities(self, db: AsyncSession) -> ResponseEnvelope:
        """모든 우선순위를 조회합니다.

        List every stored priority.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            ResponseEnvelope: 200 + 우선순위 목록 (200 with every priority)
        """
        try:
            priorities = await priority_repository.get_all(db)
            return ResponseEnvelope.success(
                200,
                "Priorities retrieved successfully",
                [self._to_response(p) for p in priorities],
            )
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving priorities", exc)

    async def get_priority(self, db: AsyncSession, priority_id: UUID) -> ResponseEnvelope:
        """우선순위 단건을 조회합니다.

        Retrieve a single priority.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            priority_id: 우선순위 ID (Priority UUID)

        Returns:
            ResponseEnvelope: 200 + 우선순위, 없으면 404 실패 봉투
                              (200 with the priority, 404 if absent)
        """
        try:
            priority: Priority = await self._get_or_raise(db, priority_id)
            return ResponseEnvelope.success(200, "Priority retrieved successfully", self._to_response(priority))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving priority", exc)

    async def delete_priority(self, db: AsyncSession, priority_id: UUID) -> ResponseEnvelope:
        """우선순위를 삭제합니다.

        Delete a priority. Refused while orders still reference it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            priority_id: 우선순위 ID (Priority UUID)

        Returns:
            ResponseEnvelope: 200 (응답 없음), 없으면 404, 사용 중이면 409
                              (200 without payload, 404 if absent, 409 while in use)
        """
        try:
            await self._get_or_raise(db, priority_id)

            # 사용 중인 우선순위 삭제 금지 — Orders reference the priority (FK RESTRICT)
            if await order_repository.exists(db, {"priority_id": priority_id}):
                raise ConflictError("Priority is used by existing orders")

            await priority_repository.delete(db, priority_id)
            return ResponseEnvelope.success(200, "Priority deleted successfully")
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error deleting priority", exc)


# 싱글턴 인스턴스 — Singleton instance
priority_service: PriorityService = PriorityService()
