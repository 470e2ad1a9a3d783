"""주문 레포지토리 — 주문 CRUD 쿼리.

Order Repository — CRUD queries for orders.
"""

from tienda.models.order import Order
from tienda.repositories.base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """주문 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the pedido table.
    """

    def __init__(self) -> None:
        super().__init__(Order)


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
