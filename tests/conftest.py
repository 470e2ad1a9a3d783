"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh engine with the schema created from ORM metadata.
"""

import os

# tienda 임포트 전에 설정 — must be set before tienda.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["AXIOM_API_TOKEN"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from tienda.database import Base, get_db  # noqa: E402
from tienda.main import app  # noqa: E402
from tienda.models import PaymentMethod, PriorityLevel  # noqa: E402
from tienda.schemas.client import ClientCreate  # noqa: E402
from tienda.schemas.priority import PriorityCreate  # noqa: E402
from tienda.services.client_service import client_service  # noqa: E402
from tienda.services.priority_service import priority_service  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 단일 커넥션을 공유하는 인메모리 DB."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성 (응답 스키마 반환)
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def customer(db: AsyncSession):
    """테스트 고객을 생성합니다."""
    envelope = await client_service.create_client(
        db, ClientCreate(name="Ana Torres", email="ana@example.com", phone="555-0101")
    )
    assert envelope.code == 201
    await db.commit()
    return envelope.response


@pytest_asyncio.fixture
async def priority(db: AsyncSession):
    """MEDIUM 우선순위를 생성합니다."""
    envelope = await priority_service.create_priority(
        db, PriorityCreate(level=PriorityLevel.MEDIUM, description="Normal handling")
    )
    assert envelope.code == 201
    await db.commit()
    return envelope.response


@pytest.fixture
def order_payload(customer, priority) -> dict:
    """주문 생성 요청 본문."""
    return {
        "client_id": customer.id,
        "priority_id": priority.id,
        "total_amount": "149.90",
        "payment_method": PaymentMethod.CREDIT_CARD.value,
        "shipping_address": "Calle 10 #20-30, Bogota",
    }
