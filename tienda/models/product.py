"""상품 카테고리 SQLAlchemy ORM 모델 정의.

Product category SQLAlchemy ORM model definition.

Tables:
    - categoria_producto: 상품 카테고리 (Product categories)
"""

import uuid
from datetime import datetime
from sqlalchemy import DateTime, Enum, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tienda.database import Base
from tienda.models.enums import CategoryStatus, ProductCategoryType


class ProductCategory(Base):
    """상품 카테고리 모델.

    Product category model. Column names follow the existing
    ``categoria_producto`` table layout.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        category: 카테고리 구분 값 (Category enumeration value)
        description: 카테고리 설명 (Category description)
        created_at: 생성 일시 — 최초 1회만 설정 (Creation timestamp, set once)
        updated_at: 수정 일시 — 수정 시마다 갱신 (Last modification timestamp)
        status: 카테고리 상태 (ACTIVE / INACTIVE)
    """

    __tablename__ = "categoria_producto"

    # 카테고리 고유 식별자 — UUID v4, auto-generated
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    category: Mapped[ProductCategoryType] = mapped_column(
        "categoria_producto",
        Enum(ProductCategoryType, native_enum=False, length=30, validate_strings=True),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column("descripcion_producto", Text, nullable=True)
    # 생성/수정 일시 — 서비스 계층에서 명시적으로 설정 (Stamped explicitly by the service layer)
    created_at: Mapped[datetime] = mapped_column("fecha_creacion", DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column("fecha_modificacion", DateTime(timezone=True), nullable=False)
    status: Mapped[CategoryStatus] = mapped_column(
        "estado_categoria",
        Enum(CategoryStatus, native_enum=False, length=20, validate_strings=True),
        nullable=False,
    )
