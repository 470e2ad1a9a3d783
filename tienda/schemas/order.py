"""주문 Pydantic 요청/응답 스키마.

Order request/response schemas.
client_id and priority_id must reference existing records; the service
verifies them before writing.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from tienda.models.enums import OrderStatus, PaymentMethod


class OrderCreate(BaseModel):
    """주문 생성 요청 스키마.

    Order creation request schema.

    Attributes:
        client_id: 주문 고객 UUID (Owning client)
        priority_id: 우선순위 UUID (Priority)
        order_date: 주문 일시 — 생략 시 생성 시각 (Order time, defaults to creation time)
        delivery_date: 배송 예정 일시 (Estimated delivery, optional)
        status: 주문 상태 (Order status, default PENDING)
        total_amount: 총 금액 — 0 이상 (Total amount, non-negative)
        payment_method: 결제 수단 (Payment method)
        shipping_address: 배송 주소 (Shipping address)
        tracking_number: 운송장 번호 (Tracking number, optional)
    """

    client_id: str  # 주문 고객 UUID (Client identifier)
    priority_id: str  # 우선순위 UUID (Priority identifier)
    order_date: datetime | None = None  # 주문 일시 (Order timestamp, optional)
    delivery_date: datetime | None = None  # 배송 예정 일시 (Estimated delivery, optional)
    status: OrderStatus = OrderStatus.PENDING  # 주문 상태 (Workflow status)
    total_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)  # 총 금액 (Total amount)
    payment_method: PaymentMethod  # 결제 수단 (Payment method)
    shipping_address: str = Field(..., min_length=1)  # 배송 주소 (Shipping address)
    tracking_number: str | None = Field(default=None, max_length=100)  # 운송장 번호 (Tracking number)


class OrderUpdate(OrderCreate):
    """주문 수정 요청 스키마 — 전체 필드 교체.

    Order update request schema (full replacement).
    An omitted order_date or status keeps the stored value.
    """

    status: OrderStatus | None = None  # 생략 시 기존 상태 유지 (Keep stored status when omitted)


class OrderResponse(BaseModel):
    """주문 응답 스키마.

    Order response schema returned from API.
    """

    id: str  # 주문 UUID 문자열 (Order UUID as string)
    client_id: str
    priority_id: str
    order_date: datetime
    delivery_date: datetime | None
    status: OrderStatus
    total_amount: Decimal
    payment_method: PaymentMethod
    shipping_address: str
    tracking_number: str | None
    updated_at: datetime  # 수정 일시 (Last modification timestamp)
