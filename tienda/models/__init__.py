"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata,
which Alembic migrations and relationship resolution require.

Modules:
    enums: 상태/구분 열거형 (Status and type enumerations)
    product: 상품 카테고리 (Product categories)
    client: 고객 (Clients)
    priority: 우선순위 (Priority levels)
    order: 주문 (Orders)
"""

from tienda.models.enums import CategoryStatus, OrderStatus, PaymentMethod, PriorityLevel, ProductCategoryType
from tienda.models.product import ProductCategory
from tienda.models.client import Client
from tienda.models.priority import Priority
from tienda.models.order import Order

__all__ = [
    "CategoryStatus", "OrderStatus", "PaymentMethod", "PriorityLevel", "ProductCategoryType",
    "ProductCategory",
    "Client",
    "Priority",
    "Order",
]
