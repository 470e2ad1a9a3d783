"""상품 카테고리 레포지토리.

Product category repository — generic CRUD over categoria_producto.
"""

from tienda.models.product import ProductCategory
from tienda.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[ProductCategory]):
    """상품 카테고리 테이블 레포지토리 (Repository for the categoria_producto table)."""

    def __init__(self) -> None:
        super().__init__(ProductCategory)


# 싱글턴 인스턴스 — Singleton instance
category_repository: CategoryRepository = CategoryRepository()
