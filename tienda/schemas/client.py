"""고객 Pydantic 요청/응답 스키마.

Client request/response schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """고객 생성/수정 요청 스키마.

    Client request schema, used for both create and full update.

    Attributes:
        name: 고객 이름 (Full name)
        email: 이메일 (Email, unique)
        phone: 전화번호 (Phone, optional)
        address: 주소 (Address, optional)
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None


class ClientUpdate(ClientCreate):
    """고객 수정 요청 스키마 — 전체 필드 교체 (Full replacement)."""


class ClientResponse(BaseModel):
    id: str  # 고객 UUID 문자열 (Client UUID as string)
    name: str
    email: str
    phone: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime
