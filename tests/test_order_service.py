"""주문 서비스 테스트.

Order service tests — reference verification, order_date defaulting,
full replacement on update, and deletion.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tienda.models import OrderStatus, PaymentMethod
from tienda.repositories.order_repository import order_repository
from tienda.schemas.order import OrderCreate, OrderUpdate
from tienda.services.order_service import _parse_uuid, order_service
from tienda.utils.exceptions import BadRequestError


async def create_committed(db: AsyncSession, payload: dict):
    envelope = await order_service.create_order(db, OrderCreate(**payload))
    await db.commit()
    return envelope


class TestCreateOrder:
    """주문 생성 테스트."""

    async def test_create_defaults(self, db: AsyncSession, order_payload):
        """주문 일시 생략 시 생성 시각, 상태 기본값 PENDING."""
        envelope = await create_committed(db, order_payload)

        assert envelope.code == 201
        order = envelope.response
        assert order.id
        assert order.client_id == order_payload["client_id"]
        assert order.priority_id == order_payload["priority_id"]
        assert order.status == OrderStatus.PENDING
        assert order.payment_method == PaymentMethod.CREDIT_CARD
        assert order.total_amount == Decimal("149.90")
        assert order.order_date == order.updated_at
        assert order.delivery_date is None
        assert order.tracking_number is None

    async def test_create_keeps_given_order_date(self, db: AsyncSession, order_payload):
        placed = datetime(2026, 3, 1, 12, 30)
        envelope = await create_committed(db, {**order_payload, "order_date": placed})
        assert envelope.code == 201
        assert envelope.response.order_date.replace(tzinfo=None) == placed

    async def test_create_unknown_client(self, db: AsyncSession, order_payload):
        """존재하지 않는 고객 참조 시 404."""
        envelope = await order_service.create_order(
            db, OrderCreate(**{**order_payload, "client_id": str(uuid.uuid4())})
        )
        assert envelope.code == 404
        assert envelope.message == "Error creating order: Client not found"
        assert (await order_service.list_orders(db)).response == []

    async def test_create_unknown_priority(self, db: AsyncSession, order_payload):
        envelope = await order_service.create_order(
            db, OrderCreate(**{**order_payload, "priority_id": str(uuid.uuid4())})
        )
        assert envelope.code == 404
        assert envelope.message == "Error creating order: Priority not found"

    async def test_create_malformed_client_id(self, db: AsyncSession, order_payload):
        """잘못된 형식의 고객 ID는 400."""
        envelope = await order_service.create_order(
            db, OrderCreate(**{**order_payload, "client_id": "not-a-uuid"})
        )
        assert envelope.code == 400
        assert "Invalid client id" in envelope.message


class TestUpdateOrder:
    """주문 수정 테스트."""

    async def test_update_replaces_fields(self, db: AsyncSession, order_payload):
        """수정 시 모든 필드 교체, 주문 일시 생략 시 기존 값 유지."""
        created = (await create_committed(db, order_payload)).response
        delivery = datetime(2026, 12, 24, 9, 0, tzinfo=timezone.utc)

        envelope = await order_service.update_order(
            db,
            uuid.UUID(created.id),
            OrderUpdate(
                **{
                    **order_payload,
                    "status": OrderStatus.SHIPPED,
                    "total_amount": "200.00",
                    "payment_method": PaymentMethod.PAYPAL,
                    "shipping_address": "Carrera 7 #45-10, Medellin",
                    "tracking_number": "TRK-0001",
                    "delivery_date": delivery,
                }
            ),
        )
        await db.commit()

        assert envelope.code == 200
        updated = envelope.response
        assert updated.status == OrderStatus.SHIPPED
        assert updated.total_amount == Decimal("200.00")
        assert updated.payment_method == PaymentMethod.PAYPAL
        assert updated.shipping_address == "Carrera 7 #45-10, Medellin"
        assert updated.tracking_number == "TRK-0001"
        assert updated.delivery_date.replace(tzinfo=None) == delivery.replace(tzinfo=None)
        assert updated.order_date == created.order_date
        assert updated.updated_at > created.updated_at

    async def test_update_without_status_keeps_stored_status(self, db: AsyncSession, order_payload):
        """상태 생략 시 기존 상태 유지 (SHIPPED → SHIPPED)."""
        created = (
            await create_committed(db, {**order_payload, "status": OrderStatus.SHIPPED})
        ).response
        assert created.status == OrderStatus.SHIPPED

        envelope = await order_service.update_order(
            db,
            uuid.UUID(created.id),
            OrderUpdate(**{**order_payload, "shipping_address": "Avenida 3 #12-40, Cali"}),
        )
        await db.commit()

        assert envelope.code == 200
        assert envelope.response.shipping_address == "Avenida 3 #12-40, Cali"
        assert envelope.response.status == OrderStatus.SHIPPED

    async def test_update_missing_order(self, db: AsyncSession, order_payload):
        envelope = await order_service.update_order(db, uuid.uuid4(), OrderUpdate(**order_payload))
        assert envelope.code == 404
        assert envelope.message == "Error updating order: Order not found"

    async def test_update_with_unknown_priority_leaves_order_untouched(
        self, db: AsyncSession, order_payload
    ):
        """참조 실패 시 주문은 변경되지 않음."""
        created = (await create_committed(db, order_payload)).response

        envelope = await order_service.update_order(
            db,
            uuid.UUID(created.id),
            OrderUpdate(**{**order_payload, "priority_id": str(uuid.uuid4()), "total_amount": "1.00"}),
        )
        assert envelope.code == 404

        current = (await order_service.get_order(db, uuid.UUID(created.id))).response
        assert current.total_amount == Decimal("149.90")
        assert current.updated_at == created.updated_at


class TestDeleteOrder:
    """주문 삭제 테스트."""

    async def test_delete_then_get_fails(self, db: AsyncSession, order_payload):
        created = (await create_committed(db, order_payload)).response
        order_id = uuid.UUID(created.id)

        envelope = await order_service.delete_order(db, order_id)
        await db.commit()
        assert envelope.code == 200
        assert envelope.response is None

        assert (await order_service.get_order(db, order_id)).code == 404
        assert (await order_service.list_orders(db)).response == []

    async def test_exists_by_client(self, db: AsyncSession, order_payload):
        """고객 ID 조건으로 주문 존재 여부 확인."""
        client_id = uuid.UUID(order_payload["client_id"])
        assert not await order_repository.exists(db, {"client_id": client_id})

        await create_committed(db, order_payload)
        assert await order_repository.exists(db, {"client_id": client_id})


class TestParseUuid:
    """참조 ID 파싱 테스트."""

    def test_valid_id(self):
        value = uuid.uuid4()
        assert _parse_uuid(str(value), "client") == value

    def test_malformed_id_raises_without_chained_cause(self):
        """잘못된 형식은 BadRequestError, 원인 예외는 연결하지 않음."""
        with pytest.raises(BadRequestError) as exc_info:
            _parse_uuid("not-a-uuid", "priority")

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid priority id: not-a-uuid"
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__ is True
