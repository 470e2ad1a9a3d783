"""도메인 열거형 정의 — 주문/카테고리/우선순위 상태 값.

Domain enumerations shared by models and schemas.
Values equal member names so they are stored by name in string columns.
"""

from enum import Enum


class OrderStatus(str, Enum):
    """주문 진행 상태 (Order workflow status)."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentMethod(str, Enum):
    """결제 수단 (Payment method used for an order)."""

    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    BANK_TRANSFER = "BANK_TRANSFER"
    PAYPAL = "PAYPAL"


class ProductCategoryType(str, Enum):
    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    HOME = "HOME"
    FOOD = "FOOD"
    BOOKS = "BOOKS"
    TOYS = "TOYS"
    SPORTS = "SPORTS"
    BEAUTY = "BEAUTY"
    OTHER = "OTHER"


class CategoryStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class PriorityLevel(str, Enum):
    """주문 우선순위 단계 (Order priority level)."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"
