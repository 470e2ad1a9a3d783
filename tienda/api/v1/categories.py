"""상품 카테고리 라우터 — CRUD 엔드포인트.

Category Router — CRUD endpoints for product categories under /api/v1/categories.
Every endpoint returns a ResponseEnvelope body whose code is the HTTP status.
"""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from tienda.api.deps import DbSession, envelope_response
from tienda.schemas.envelope import ResponseEnvelope
from tienda.schemas.product import CategoryCreate, CategoryUpdate
from tienda.services.category_service import category_service

router: APIRouter = APIRouter()


@router.get("", response_model=ResponseEnvelope)
async def list_categories(db: DbSession) -> JSONResponse:
    """상품 카테고리 목록을 조회합니다.

    List every category.
    """
    return await envelope_response(db, await category_service.list_categories(db))


@router.get("/{category_id}", response_model=ResponseEnvelope)
async def get_category(category_id: UUID, db: DbSession) -> JSONResponse:
    """상품 카테고리 단건 조회 (Retrieve one category)."""
    return await envelope_response(db, await category_service.get_category(db, category_id))


@router.post("", response_model=ResponseEnvelope, status_code=201)
async def create_category(data: CategoryCreate, db: DbSession) -> JSONResponse:
    """새 상품 카테고리 생성 (Create a new category)."""
    return await envelope_response(db, await category_service.create_category(db, data))


@router.put("/{category_id}", response_model=ResponseEnvelope)
async def update_category(category_id: UUID, data: CategoryUpdate, db: DbSession) -> JSONResponse:
    """상품 카테고리 정보를 교체합니다.

    Replace every mutable field of an existing category.
    """
    return await envelope_response(db, await category_service.update_category(db, category_id, data))


@router.delete("/{category_id}", response_model=ResponseEnvelope)
async def delete_category(category_id: UUID, db: DbSession) -> JSONResponse:
    """상품 카테고리 삭제 (Delete a category)."""
    return await envelope_response(db, await category_service.delete_category(db, category_id))
