"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware, error handlers, and router registration.
Request validation errors and unhandled exceptions are rendered as
response envelopes so every endpoint answers with the same shape.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tienda.config import settings
from tienda.middleware.axiom_logging import AxiomLoggingMiddleware
from tienda.schemas.envelope import ResponseEnvelope

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
# (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _envelope_json(envelope: ResponseEnvelope) -> JSONResponse:
    return JSONResponse(status_code=envelope.code, content=jsonable_encoder(envelope))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 → 400 봉투.

    Pydantic request validation failure rendered as a 400 envelope.
    """
    details: list[str] = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return _envelope_json(ResponseEnvelope.failure(400, "Invalid request: " + "; ".join(details)))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """라우팅 오류(404/405 등) → 봉투 (Routing errors rendered as envelopes)."""
    return _envelope_json(ResponseEnvelope.failure(exc.status_code, str(exc.detail)))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외(커밋 실패 등) → 500 봉투.

    Unhandled exceptions (e.g. a failed commit) rendered as a 500 envelope.
    """
    return _envelope_json(ResponseEnvelope.from_exception("Internal server error", exc))


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from tienda.api.v1 import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
