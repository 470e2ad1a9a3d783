"""우선순위 라우터 — CRUD 엔드포인트.

Priority Router — CRUD endpoints for priority levels under /api/v1/priorities.
Every endpoint returns a ResponseEnvelope body whose code is the HTTP status.
"""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from tienda.api.deps import DbSession, envelope_response
from tienda.schemas.envelope import ResponseEnvelope
from tienda.schemas.priority import PriorityCreate, PriorityUpdate
from tienda.services.priority_service import priority_service

router: APIRouter = APIRouter()


@router.get("", response_model=ResponseEnvelope)
async def list_priorities(db: DbSession) -> JSONResponse:
    """우선순위 목록을 조회합니다.

    List every priority.
    """
    return await envelope_response(db, await priority_service.list_priorities(db))


@router.get("/{priority_id}", response_model=ResponseEnvelope)
async def get_priority(priority_id: UUID, db: DbSession) -> JSONResponse:
    """우선순위 단건 조회 (Retrieve one priority)."""
    return await envelope_response(db, await priority_service.get_priority(db, priority_id))


@router.post("", response_model=ResponseEnvelope, status_code=201)
async def create_priority(data: PriorityCreate, db: DbSession) -> JSONResponse:
    """새 우선순위 생성 (Create a new priority)."""
    return await envelope_response(db, await priority_service.create_priority(db, data))


@router.put("/{priority_id}", response_model=ResponseEnvelope)
async def update_priority(priority_id: UUID, data: PriorityUpdate, db: DbSession) -> JSONResponse:
    """우선순위 정보를 교체합니다.

    Replace every mutable field of an existing priority.
    """
    return await envelope_response(db, await priority_service.update_priority(db, priority_id, data))


@router.delete("/{priority_id}", response_model=ResponseEnvelope)
async def delete_priority(priority_id: UUID, db: DbSession) -> JSONResponse:
    """우선순위 삭제 (Delete a priority)."""
    return await envelope_response(db, await priority_service.delete_priority(db, priority_id))
