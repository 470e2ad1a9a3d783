"""공통 응답 봉투(envelope) 스키마.

Uniform response envelope returned by every service operation.
The HTTP layer serializes the envelope as the response body and uses
``code`` as the HTTP status.
"""

from typing import Any

from pydantic import BaseModel

from tienda.utils.exceptions import error_message, status_code_for


class ResponseEnvelope(BaseModel):
    """서비스 응답 봉투.

    Service response envelope.

    Attributes:
        response: 응답 페이로드 — 실패 또는 삭제 시 None (Payload, None on failure/delete)
        code: HTTP 상태 코드와 동일한 숫자 코드 (Numeric code mirroring HTTP status)
        message: 사용자 표시용 메시지 (Human-readable message)
    """

    response: Any = None  # 응답 페이로드 (Payload of unspecified shape)
    code: int  # 상태 코드 — 201/200 성공, 4xx/5xx 실패 (Status code)
    message: str  # 응답 메시지 (Human-readable message)

    @property
    def ok(self) -> bool:
        """성공 여부 — 2xx 코드 (True for 2xx codes)."""
        return 200 <= self.code < 300

    @classmethod
    def success(cls, code: int, message: str, response: Any = None) -> "ResponseEnvelope":
        return cls(response=response, code=code, message=message)

    @classmethod
    def failure(cls, code: int, message: str) -> "ResponseEnvelope":
        return cls(response=None, code=code, message=message)

    @classmethod
    def from_exception(cls, action: str, exc: Exception) -> "ResponseEnvelope":
        """예외를 실패 봉투로 변환합니다.

        Build a failure envelope from an exception raised during ``action``.
        The code is classified by ``status_code_for``; the message keeps the
        exception text, e.g. "Error updating category: Category not found".
        """
        return cls.failure(status_code_for(exc), f"{action}: {error_message(exc)}")
