"""FastAPI 의존성 및 응답 헬퍼 모듈.

FastAPI dependency and response helper module.
Routes hand the service envelope to ``envelope_response``, which commits
the request transaction on success and renders the envelope as JSON with
the envelope code as the HTTP status.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from tienda.database import get_db
from tienda.schemas.envelope import ResponseEnvelope

# 요청 단위 DB 세션 의존성 — Per-request database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db)]


async def envelope_response(db: AsyncSession, envelope: ResponseEnvelope) -> JSONResponse:
    """서비스 봉투를 HTTP 응답으로 변환합니다.

    Commit on a successful envelope and render it as a JSON response.
    Failed envelopes were already rolled back by the service.

    Args:
        db: 요청 DB 세션 (Request database session)
        envelope: 서비스 응답 봉투 (Service response envelope)

    Returns:
        JSONResponse: 봉투 본문 + 봉투 코드 상태 (Envelope body with its code as status)
    """
    if envelope.ok:
        await db.commit()
    return JSONResponse(status_code=envelope.code, content=jsonable_encoder(envelope))
