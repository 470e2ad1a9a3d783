"""고객 SQLAlchemy ORM 모델 정의.

Client SQLAlchemy ORM model definition.

Tables:
    - cliente: 주문 고객 (Customers placing orders)
"""

import uuid
from datetime import datetime
from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tienda.database import Base


class Client(Base):
    """고객 모델 — 주문의 소유자.

    Client model — owner of orders.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 고객 이름 (Full name)
        email: 이메일 — 고유 (Email address, unique)
        phone: 전화번호 (Phone number, optional)
        address: 기본 주소 (Default address, optional)
        created_at: 생성 일시 (Creation timestamp)
        updated_at: 수정 일시 (Last modification timestamp)
    """

    __tablename__ = "cliente"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column("nombre", String(255), nullable=False)
    email: Mapped[str] = mapped_column("correo", String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column("telefono", String(50), nullable=True)
    address: Mapped[str | None] = mapped_column("direccion", Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column("fecha_creacion", DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column("fecha_modificacion", DateTime(timezone=True), nullable=False)
