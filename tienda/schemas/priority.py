"""우선순위 Pydantic 요청/응답 스키마.

Priority request/response schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from tienda.models.enums import PriorityLevel


class PriorityCreate(BaseModel):
    level: PriorityLevel  # 우선순위 단계 — LOW|MEDIUM|HIGH|URGENT
    description: str | None = Field(default=None, max_length=500)


class PriorityUpdate(PriorityCreate):
    """우선순위 수정 요청 스키마 — 전체 필드 교체 (Full replacement)."""


class PriorityResponse(BaseModel):
    id: str  # 우선순위 UUID 문자열 (Priority UUID as string)
    level: PriorityLevel
    description: str | None
    created_at: datetime
    updated_at: datetime
