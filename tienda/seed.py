"""초기 데이터 시드 스크립트 — 테이블 및 기본 우선순위 생성.

Seed script — Creates tables and the default priority levels.

Usage:
    python -m tienda.seed

Creates:
    - 4개 우선순위: LOW, MEDIUM, HIGH, URGENT (4 priority levels)
"""

import asyncio

from tienda.database import Base, async_session, engine
from tienda.models import PriorityLevel
from tienda.repositories.priority_repository import priority_repository
from tienda.schemas.priority import PriorityCreate
from tienda.services.priority_service import priority_service

DEFAULT_PRIORITIES: list[tuple[PriorityLevel, str]] = [
    (PriorityLevel.LOW, "Standard handling"),
    (PriorityLevel.MEDIUM, "Handle before standard orders"),
    (PriorityLevel.HIGH, "Ship on the next dispatch"),
    (PriorityLevel.URGENT, "Ship immediately"),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts every missing
    default priority level.

    Idempotent: 이미 존재하는 단계는 건너뜁니다 (Existing levels are skipped).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        for level, description in DEFAULT_PRIORITIES:
            if await priority_repository.get_by_level(db, level) is not None:
                print(f"Priority {level.value} already exists. Skipping.")
                continue
            envelope = await priority_service.create_priority(
                db, PriorityCreate(level=level, description=description)
            )
            if not envelope.ok:
                raise RuntimeError(envelope.message)
            print(f"Created priority {level.value}")
        await db.commit()

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
