"""API v1 라우터 패키지 — 모든 엔드포인트 통합.

API v1 Router package — Aggregates all endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - categories: 상품 카테고리 관리 (Product category management)
    - clients: 고객 관리 (Client management)
    - priorities: 우선순위 관리 (Priority management)
    - orders: 주문 관리 (Order management)
"""

from fastapi import APIRouter

from tienda.api.v1.categories import router as categories_router
from tienda.api.v1.clients import router as clients_router
from tienda.api.v1.priorities import router as priorities_router
from tienda.api.v1.orders import router as orders_router

api_router: APIRouter = APIRouter()

api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(clients_router, prefix="/clients", tags=["Clients"])
api_router.include_router(priorities_router, prefix="/priorities", tags=["Priorities"])
api_router.include_router(orders_router, prefix="/orders", tags=["Orders"])
