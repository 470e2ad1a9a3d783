"""주문 서비스 — 주문 CRUD 비즈니스 로직.

Order Service — Business logic for order creation, retrieval, update,
and deletion. The referenced client and priority are verified before
every write.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tienda.models.client import Client
from tienda.models.order import Order
from tienda.models.priority import Priority
from tienda.repositories.client_repository import client_repository
from tienda.repositories.order_repository import order_repository
from tienda.repositories.priority_repository import priority_repository
from tienda.schemas.envelope import ResponseEnvelope
from tienda.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from tienda.utils.clock import next_modification, utc_now
from tienda.utils.exceptions import BadRequestError, NotFoundError


def _parse_uuid(value: str, label: str) -> UUID:
    """문자열 ID를 UUID로 변환합니다 (Parse a string id, 400 when malformed)."""
    try:
        return UUID(value)
    except ValueError:
        raise BadRequestError(f"Invalid {label} id: {value}") from None


class OrderService:
    """주문 관련 비즈니스 로직을 처리하는 서비스.

    Service handling order business logic.
    """

    def _to_response(self, order: Order) -> OrderResponse:
        """주문 모델을 응답 스키마로 변환합니다.

        Convert an Order model instance to an OrderResponse schema.

        Args:
            order: 주문 모델 (Order model instance)

        Returns:
            OrderResponse: 주문 응답 (Order response)
        """
        return OrderResponse(
            id=str(order.id),
            client_id=str(order.client_id),
            priority_id=str(order.priority_id),
            order_date=order.order_date,
            delivery_date=order.delivery_date,
            status=order.status,
            total_amount=order.total_amount,
            payment_method=order.payment_method,
            shipping_address=order.shipping_address,
            tracking_number=order.tracking_number,
            updated_at=order.updated_at,
        )

    async def _get_or_raise(self, db: AsyncSession, order_id: UUID) -> Order:
        order: Order | None = await order_repository.get_by_id(db, order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    async def _resolve_references(
        self,
        db: AsyncSession,
        data: OrderCreate,
    ) -> tuple[UUID, UUID]:
        """주문이 참조하는 고객과 우선순위를 확인합니다.

        Verify that the client and priority referenced by the request exist.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 주문 요청 데이터 (Order request data)

        Returns:
            tuple[UUID, UUID]: (고객 ID, 우선순위 ID) (Client and priority UUIDs)

        Raises:
            BadRequestError: ID 형식이 잘못되었을 때 (Malformed id)
            NotFoundError: 고객 또는 우선순위가 없을 때 (Client or priority not found)
        """
        client_id: UUID = _parse_uuid(data.client_id, "client")
        priority_id: UUID = _parse_uuid(data.priority_id, "priority")

        client: Client | None = await client_repository.get_by_id(db, client_id)
        if client is None:
            raise NotFoundError("Client not found")
        priority: Priority | None = await priority_repository.get_by_id(db, priority_id)
        if priority is None:
            raise NotFoundError("Priority not found")

        return client_id, priority_id

    async def create_order(self, db: AsyncSession, data: OrderCreate) -> ResponseEnvelope:
        """새 주문을 생성합니다.

        Create a new order. order_date defaults to the creation instant,
        and updated_at is stamped with the same instant.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 주문 생성 데이터 (Order creation data)

        Returns:
            ResponseEnvelope: 201 + 생성된 주문, 또는 실패 봉투
                              (201 with the created order, or a failure envelope)
        """
        try:
            client_id, priority_id = await self._resolve_references(db, data)
            now: datetime = utc_now()
            order: Order = await order_repository.create(
                db,
                {
                    "client_id": client_id,
                    "priority_id": priority_id,
                    "order_date": data.order_date or now,
                    "delivery_date": data.delivery_date,
                    "status": data.status,
                    "total_amount": data.total_amount,
                    "payment_method": data.payment_method,
                    "shipping_address": data.shipping_address,
                    "tracking_number": data.tracking_number,
                    "updated_at": now,
                },
            )
            return ResponseEnvelope.success(201, "Order created successfully", self._to_response(order))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error creating order", exc)

    async def update_order(
        self,
        db: AsyncSession,
        order_id: UUID,
        data: OrderUpdate,
    ) -> ResponseEnvelope:
        """주문의 모든 수정 가능 필드를 교체합니다.

        Replace every mutable field of an existing order and refresh its
        modification timestamp. An omitted order_date or status keeps the
        stored value.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order UUID)
            data: 수정 데이터 (Replacement data)

        Returns:
            ResponseEnvelope: 200 + 수정된 주문, 없으면 404 실패 봉투
                              (200 with the updated order, 404 if absent)
        """
        try:
            order: Order = await self._get_or_raise(db, order_id)
            client_id, priority_id = await self._resolve_references(db, data)

            order.client_id = client_id
            order.priority_id = priority_id
            if data.order_date is not None:
                order.order_date = data.order_date
            order.delivery_date = data.delivery_date
            if data.status is not None:
                order.status = data.status
            order.total_amount = data.total_amount
            order.payment_method = data.payment_method
            order.shipping_address = data.shipping_address
            order.tracking_number = data.tracking_number
            order.updated_at = next_modification(order.updated_at)

            order = await order_repository.save(db, order)
            return ResponseEnvelope.success(200, "Order updated successfully", self._to_response(order))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error updating order", exc)

    async def list_orders(self, db: AsyncSession) -> ResponseEnvelope:
        """모든 주문을 조회합니다 (List every stored order, unordered)."""
        try:
            orders = await order_repository.get_all(db)
            return ResponseEnvelope.success(
                200,
                "Orders retrieved successfully",
                [self._to_response(o) for o in orders],
            )
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving orders", exc)

    async def get_order(self, db: AsyncSession, order_id: UUID) -> ResponseEnvelope:
        """주문 단건을 조회합니다.

        Retrieve a single order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order UUID)

        Returns:
            ResponseEnvelope: 200 + 주문, 없으면 404 실패 봉투
                              (200 with the order, 404 if absent)
        """
        try:
            order: Order = await self._get_or_raise(db, order_id)
            return ResponseEnvelope.success(200, "Order retrieved successfully", self._to_response(order))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving order", exc)

    async def delete_order(self, db: AsyncSession, order_id: UUID) -> ResponseEnvelope:
        """주문을 삭제합니다.

        Delete an order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order UUID)

        Returns:
            ResponseEnvelope: 200 (응답 없음), 없으면 404 실패 봉투
                              (200 without payload, 404 if absent)
        """
        try:
            await self._get_or_raise(db, order_id)
            await order_repository.delete(db, order_id)
            return ResponseEnvelope.success(200, "Order deleted successfully")
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error deleting order", exc)


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
