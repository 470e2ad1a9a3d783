"""우선순위 SQLAlchemy ORM 모델 정의.

Priority SQLAlchemy ORM model definition.

Tables:
    - prioridad: 주문 우선순위 (Order priority levels)
"""

import uuid
from datetime import datetime
from sqlalchemy import DateTime, Enum, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tienda.database import Base
from tienda.models.enums import PriorityLevel


class Priority(Base):
    """우선순위 모델 — 주문 처리 순서 구분.

    Priority model — orders reference one priority level.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        level: 우선순위 단계 — 고유 (Priority level, unique)
        description: 설명 (Description, optional)
        created_at: 생성 일시 (Creation timestamp)
        updated_at: 수정 일시 (Last modification timestamp)
    """

    __tablename__ = "prioridad"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    level: Mapped[PriorityLevel] = mapped_column(
        "nivel",
        Enum(PriorityLevel, native_enum=False, length=20, validate_strings=True),
        unique=True,
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column("descripcion", Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column("fecha_creacion", DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column("fecha_modificacion", DateTime(timezone=True), nullable=False)
