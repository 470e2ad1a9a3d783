"""고객 레포지토리 — 고객 CRUD 쿼리.

Client Repository — CRUD queries for clients.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from tienda.models.client import Client
from tienda.repositories.base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    """고객 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the cliente table.
    """

    def __init__(self) -> None:
        super().__init__(Client)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Client | None:
        """이메일로 고객을 조회합니다.

        Retrieve a client by email address.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 이메일 주소 (Email address)

        Returns:
            Client | None: 조회된 고객 또는 None (Found client or None)
        """
        query: Select = select(Client).where(Client.email == email)
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
client_repository: ClientRepository = ClientRepository()
