"""주문 라우터 — CRUD 엔드포인트.

Order Router — CRUD endpoints for orders under /api/v1/orders.
Every endpoint returns a ResponseEnvelope body whose code is the HTTP status.
"""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from tienda.api.deps import DbSession, envelope_response
from tienda.schemas.envelope import ResponseEnvelope
from tienda.schemas.order import OrderCreate, OrderUpdate
from tienda.services.order_service import order_service

router: APIRouter = APIRouter()


@router.get("", response_model=ResponseEnvelope)
async def list_orders(db: DbSession) -> JSONResponse:
    """주문 목록을 조회합니다.

    List every order.
    """
    return await envelope_response(db, await order_service.list_orders(db))


@router.get("/{order_id}", response_model=ResponseEnvelope)
async def get_order(order_id: UUID, db: DbSession) -> JSONResponse:
    """주문 단건 조회 (Retrieve one order)."""
    return await envelope_response(db, await order_service.get_order(db, order_id))


@router.post("", response_model=ResponseEnvelope, status_code=201)
async def create_order(data: OrderCreate, db: DbSession) -> JSONResponse:
    """새 주문을 생성합니다.

    Create a new order. The referenced client and priority must exist.
    """
    return await envelope_response(db, await order_service.create_order(db, data))


@router.put("/{order_id}", response_model=ResponseEnvelope)
async def update_order(order_id: UUID, data: OrderUpdate, db: DbSession) -> JSONResponse:
    """주문 정보를 교체합니다.

    Replace every mutable field of an existing order.
    """
    return await envelope_response(db, await order_service.update_order(db, order_id, data))


@router.delete("/{order_id}", response_model=ResponseEnvelope)
async def delete_order(order_id: UUID, db: DbSession) -> JSONResponse:
    """주문 삭제 (Delete an order)."""
    return await envelope_response(db, await order_service.delete_order(db, order_id))
