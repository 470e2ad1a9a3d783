"""주문 SQLAlchemy ORM 모델 정의.

Order SQLAlchemy ORM model definition.
An order belongs to one client and carries one priority level.

Tables:
    - pedido: 고객 주문 (Customer orders)
"""

import uuid
from datetime import datetime
from decimal import Decimal
from sqlalchemy import DateTime, Enum, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tienda.database import Base
from tienda.models.enums import OrderStatus, PaymentMethod


class Order(Base):
    """주문 모델.

    Order model placed by a client.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        client_id: 주문 고객 FK (Owning client, many-to-one)
        priority_id: 우선순위 FK (Priority, many-to-one)
        order_date: 주문 일시 (Order timestamp)
        delivery_date: 배송 예정 일시 (Estimated delivery timestamp, optional)
        status: 주문 상태 (Order status enumeration)
        total_amount: 총 금액 (Total amount, decimal)
        payment_method: 결제 수단 (Payment method enumeration)
        shipping_address: 배송 주소 (Shipping address)
        updated_at: 수정 일시 (Last modification timestamp)
        tracking_number: 운송장 번호 (Tracking number, optional)

    Relationships:
        client: 주문 고객 (Owning client)
        priority: 우선순위 (Priority level)
    """

    __tablename__ = "pedido"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 고객 FK — RESTRICT: 주문이 남아있는 고객은 삭제 불가 (Clients with orders cannot be deleted)
    client_id: Mapped[uuid.UUID] = mapped_column(
        "cliente_id", Uuid, ForeignKey("cliente.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    priority_id: Mapped[uuid.UUID] = mapped_column(
        "prioridad_id", Uuid, ForeignKey("prioridad.id", ondelete="RESTRICT"), nullable=False
    )
    order_date: Mapped[datetime] = mapped_column("fecha_pedido", DateTime(timezone=True), nullable=False)
    delivery_date: Mapped[datetime | None] = mapped_column("fecha_entrega", DateTime(timezone=True), nullable=True)
    status: Mapped[OrderStatus] = mapped_column(
        "estado_pedido",
        Enum(OrderStatus, native_enum=False, length=20, validate_strings=True),
        nullable=False,
    )
    total_amount: Mapped[Decimal] = mapped_column("monto_total", Numeric(12, 2), nullable=False)
    payment_method: Mapped[PaymentMethod] = mapped_column(
        "metodo_pago",
        Enum(PaymentMethod, native_enum=False, length=20, validate_strings=True),
        nullable=False,
    )
    shipping_address: Mapped[str] = mapped_column("direccion_envio", Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column("fecha_modificacion", DateTime(timezone=True), nullable=False)
    tracking_number: Mapped[str | None] = mapped_column("numero_seguimiento", String(100), nullable=True)

    # 관계 — Relationships (단방향, 응답에는 ID만 노출)
    client = relationship("Client")
    priority = relationship("Priority")
