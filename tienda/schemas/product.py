"""상품 카테고리 Pydantic 요청/응답 스키마.

Product category request/response schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from tienda.models.enums import CategoryStatus, ProductCategoryType


class CategoryCreate(BaseModel):
    """카테고리 생성/수정 요청 스키마.

    Category request schema. Updates replace every mutable field,
    so the same shape is used for create and update.

    Attributes:
        category: 카테고리 구분 (Category enumeration value)
        description: 설명 (Description)
        status: 카테고리 상태 (Category status)
    """

    category: ProductCategoryType  # 카테고리 구분 — ELECTRONICS, CLOTHING, ...
    description: str | None = Field(default=None, max_length=2000)  # 설명 (Description)
    status: CategoryStatus = CategoryStatus.ACTIVE  # 상태 — ACTIVE|INACTIVE


class CategoryUpdate(CategoryCreate):
    """카테고리 수정 요청 스키마 — 전체 필드 교체.

    Category update request schema (full replacement).
    An omitted status keeps the stored value.
    """

    status: CategoryStatus | None = None  # 생략 시 기존 상태 유지 (Keep stored status when omitted)


class CategoryResponse(BaseModel):
    """카테고리 응답 스키마.

    Category response schema.
    """

    id: str  # 카테고리 UUID 문자열 (Category UUID as string)
    category: ProductCategoryType
    description: str | None
    status: CategoryStatus
    created_at: datetime  # 생성 일시 (Creation timestamp)
    updated_at: datetime  # 수정 일시 (Last modification timestamp)
