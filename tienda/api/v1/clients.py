"""고객 라우터 — CRUD 엔드포인트.

Client Router — CRUD endpoints for clients under /api/v1/clients.
Every endpoint returns a ResponseEnvelope body whose code is the HTTP status.
"""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from tienda.api.deps import DbSession, envelope_response
from tienda.schemas.envelope import ResponseEnvelope
from tienda.schemas.client import ClientCreate, ClientUpdate
from tienda.services.client_service import client_service

router: APIRouter = APIRouter()


@router.get("", response_model=ResponseEnvelope)
async def list_clients(db: DbSession) -> JSONResponse:
    """고객 목록을 조회합니다.

    List every client.
    """
    return await envelope_response(db, await client_service.list_clients(db))


@router.get("/{client_id}", response_model=ResponseEnvelope)
async def get_client(client_id: UUID, db: DbSession) -> JSONResponse:
    """고객 단건 조회 (Retrieve one client)."""
    return await envelope_response(db, await client_service.get_client(db, client_id))


@router.post("", response_model=ResponseEnvelope, status_code=201)
async def create_client(data: ClientCreate, db: DbSession) -> JSONResponse:
    """새 고객 생성 (Create a new client)."""
    return await envelope_response(db, await client_service.create_client(db, data))


@router.put("/{client_id}", response_model=ResponseEnvelope)
async def update_client(client_id: UUID, data: ClientUpdate, db: DbSession) -> JSONResponse:
    """고객 정보를 교체합니다.

    Replace every mutable field of an existing client.
    """
    return await envelope_response(db, await client_service.update_client(db, client_id, data))


@router.delete("/{client_id}", response_model=ResponseEnvelope)
async def delete_client(client_id: UUID, db: DbSession) -> JSONResponse:
    """고객을 삭제합니다. 주문이 남아 있으면 409.

    Delete a client. Returns 409 while the client still owns orders.
    """
    return await envelope_response(db, await client_service.delete_client(db, client_id))
