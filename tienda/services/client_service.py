"""고객 서비스 — 고객 CRUD 비즈니스 로직.

Client Service — Business logic for client CRUD operations.
Enforces unique email addresses and refuses to delete clients that still
own orders.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tienda.models.client import Client
from tienda.repositories.client_repository import client_repository
from tienda.repositories.order_repository import order_repository
from tienda.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from tienda.schemas.envelope import ResponseEnvelope
from tienda.utils.clock import next_modification, utc_now
from tienda.utils.exceptions import ConflictError, DuplicateError, NotFoundError


class ClientService:
    """고객 관련 비즈니스 로직을 처리하는 서비스.

    Service handling client business logic.
    """

    def _to_response(self, client: Client) -> ClientResponse:
        return ClientResponse(
            id=str(client.id),
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )

    async def _get_or_raise(self, db: AsyncSession, client_id: UUID) -> Client:
        client: Client | None = await client_repository.get_by_id(db, client_id)
        if client is None:
            raise NotFoundError("Client not found")
        return client

    async def _ensure_email_available(
        self,
        db: AsyncSession,
        email: str,
        client_id: UUID | None = None,
    ) -> None:
        """이메일 중복을 확인합니다.

        Ensure no other client uses the email.

        Raises:
            DuplicateError: 다른 고객이 같은 이메일을 사용 중일 때
                            (Another client already uses this email)
        """
        existing: Client | None = await client_repository.get_by_email(db, email)
        if existing is not None and existing.id != client_id:
            raise DuplicateError("A client with this email already exists")

    async def create_client(self, db: AsyncSession, data: ClientCreate) -> ResponseEnvelope:
        """새 고객을 생성합니다.

        Create a new client.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 고객 생성 데이터 (Client creation data)

        Returns:
            ResponseEnvelope: 201 + 생성된 고객, 이메일 중복 시 409
                              (201 with the created client, 409 on duplicate email)
        """
        try:
            await self._ensure_email_available(db, data.email)
            now: datetime = utc_now()
            client: Client = await client_repository.create(
                db,
                {
                    "name": data.name,
                    "email": data.email,
                    "phone": data.phone,
                    "address": data.address,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            return ResponseEnvelope.success(201, "Client created successfully", self._to_response(client))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error creating client", exc)

    async def update_client(
        self,
        db: AsyncSession,
        client_id: UUID,
        data: ClientUpdate,
    ) -> ResponseEnvelope:
        """고객 정보를 교체합니다 (Replace every mutable field of a client)."""
        try:
            client: Client = await self._get_or_raise(db, client_id)
            await self._ensure_email_available(db, data.email, client_id)

            client.name = data.name
            client.email = data.email
            client.phone = data.phone
            client.address = data.address
            client.updated_at = next_modification(client.updated_at)

            client = await client_repository.save(db, client)
            return ResponseEnvelope.success(200, "Client updated successfully", self._to_response(client))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error updating client", exc)

    async def list_clients(self, db: AsyncSession) -> ResponseEnvelope:
        """모든 고객을 조회합니다.

        List every stored client.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            ResponseEnvelope: 200 + 고객 목록 (200 with every client)
        """
        try:
            clients = await client_repository.get_all(db)
            return ResponseEnvelope.success(
                200,
                "Clients retrieved successfully",
                [self._to_response(c) for c in clients],
            )
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving clients", exc)

    async def get_client(self, db: AsyncSession, client_id: UUID) -> ResponseEnvelope:
        """고객 단건을 조회합니다.

        Retrieve a single client.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            client_id: 고객 ID (Client UUID)

        Returns:
            ResponseEnvelope: 200 + 고객, 없으면 404 실패 봉투
                              (200 with the client, 404 if absent)
        """
        try:
            client: Client = await self._get_or_raise(db, client_id)
            return ResponseEnvelope.success(200, "Client retrieved successfully", self._to_response(client))
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error retrieving client", exc)

    async def delete_client(self, db: AsyncSession, client_id: UUID) -> ResponseEnvelope:
        """고객을 삭제합니다.

        Delete a client. Clients that still own orders are kept.

        Returns:
            ResponseEnvelope: 200, 없으면 404, 주문이 남아 있으면 409
                              (200, 404 if absent, 409 if orders remain)
        """
        try:
            await self._get_or_raise(db, client_id)

            # 주문 보유 고객 삭제 금지 — Orders reference the client (FK RESTRICT)
            if await order_repository.exists(db, {"client_id": client_id}):
                raise ConflictError("Client has existing orders")

            await client_repository.delete(db, client_id)
            return ResponseEnvelope.success(200, "Client deleted successfully")
        except Exception as exc:
            await db.rollback()
            return ResponseEnvelope.from_exception("Error deleting client", exc)


# 싱글턴 인스턴스 — Singleton instance
client_service: ClientService = ClientService()
