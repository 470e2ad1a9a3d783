"""상품 카테고리 서비스 — 카테고리 CRUD 비즈니스 로직.

Product Category Service — Business logic for category CRUD operations.
Every operation returns a ResponseEnvelope; failures are rolled back and
reported with a classified status code instead of being raised.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tienda.models.product import ProductCategory
from tienda.repositories.category_repository import category_repository
from tienda.schemas.envelope import ResponseEnvelope
from tienda.schemas.product import CategoryCreate, CategoryResponse, CategoryUpdate
from tienda.utils.clock import next_modification, utc_now
from tienda.utils.exceptions import NotFoundError


class CategoryService:
    """상품 카테고리 관련 비즈니스 로직을 처리하는 서비스.

    Service handling product category business logic.
    """

    def _to_response(self, category: ProductCategory) -> CategoryResponse:
        """카테고리 모델을 응답 스키마로 변환합니다.

        Convert a ProductCategory model instance to a CategoryResponse schema.
        """
        return CategoryResponse(
            id=str(category.id),
            category=category.category,
            description=category.description,
            status=category.status,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    async def _get_or_raise(self, db: AsyncSession, category_id: UUID) -> ProductCategory:
        category: ProductCategory | None = await category_repository.get_by_id(db, category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    async def create_category(
        self,
        db: AsyncSession,
        data: CategoryCreate,
    ) -> ResponseEnvelope:
        """새 카테고리를 생성합니다.

        Create a new category. Creation and modification timestamps are
        stamped with the same instant.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 카테고리 생성 데이터 (Category creation data)

        Returns:
            ResponseEnvelope: 201 + 생성된 카테고리, 또는 실패 봉투
                              (201 with the created category, or a failure envelope)
        """
        try:
            now: datetime = utc_now()
            category: ProductCategory = await category_repository.create(
                db,
                {
                    "category": data.category,
                    "description": data.description,
                    "status": data.status,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            return ResponseEnvelope.success(201, "Category created successfully", self._to_response(category))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error creating category", exc)

    async def update_category(
        self,
        db: AsyncSession,
        category_id: UUID,
        data: CategoryUpdate,
    ) -> ResponseEnvelope:
        """카테고리의 모든 수정 가능 필드를 교체합니다.

        Replace every mutable field of an existing category and refresh
        its modification timestamp. created_at is never touched, and an
        omitted status keeps the stored value.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category_id: 카테고리 ID (Category UUID)
            data: 수정 데이터 (Replacement data)

        Returns:
            ResponseEnvelope: 200 + 수정된 카테고리, 없으면 404 실패 봉투
                              (200 with the updated category, 404 if absent)
        """
        try:
            category: ProductCategory = await self._get_or_raise(db, category_id)

            category.category = data.category
            category.description = data.description
            if data.status is not None:
                category.status = data.status
            category.updated_at = next_modification(category.updated_at)

            category = await category_repository.save(db, category)
            return ResponseEnvelope.success(200, "Category updated successfully", self._to_response(category))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error updating category", exc)

    async def list_categories(self, db: AsyncSession) -> ResponseEnvelope:
        """모든 카테고리를 조회합니다 (List every stored category, unordered)."""
        try:
            categories = await category_repository.get_all(db)
            return ResponseEnvelope.success(
                200,
                "Categories retrieved successfully",
                [self._to_response(c) for c in categories],
            )
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving categories", exc)

    async def get_category(self, db: AsyncSession, category_id: UUID) -> ResponseEnvelope:
        """카테고리 단건을 조회합니다.

        Retrieve a single category.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category_id: 카테고리 ID (Category UUID)

        Returns:
            ResponseEnvelope: 200 + 카테고리, 없으면 404 실패 봉투
                              (200 with the category, 404 if absent)
        """
        try:
            category: ProductCategory = await self._get_or_raise(db, category_id)
            return ResponseEnvelope.success(200, "Category retrieved successfully", self._to_response(category))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving category", exc)

    async def delete_category(self, db: AsyncSession, category_id: UUID) -> ResponseEnvelope:
        """카테고리를 삭제합니다.

        Delete a category by its ID. The success envelope carries no payload.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category_id: 카테고리 ID (Category UUID)

        Returns:
            ResponseEnvelope: 200 (페이로드 없음), 없으면 404 실패 봉투
                              (200 without payload, 404 if absent)
        """
        try:
            await self._get_or_raise(db, category_id)
            await category_repository.delete(db, category_id)
            return ResponseEnvelope.success(200, "Category deleted successfully")
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error deleting category", exc)


# 싱글턴 인스턴스 — Singleton instance
category_service: CategoryService = CategoryService()
