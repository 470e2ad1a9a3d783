"""커스텀 HTTP 예외 클래스 및 오류 분류 모듈.

Custom HTTP exception classes and error classification module.
Services raise these exceptions internally; every public service operation
converts whatever was raised into a failure envelope through
``status_code_for``, so a missing record, a constraint violation, and an
infrastructure fault each keep their own status code.

Usage:
    from tienda.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Category not found")
    raise DuplicateError("A client with this email already exists")
"""

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (category, order, client, priority) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when a write would violate a uniqueness rule
    (e.g. duplicate client email, duplicate priority level).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ConflictError(HTTPException):
    """409 Conflict 예외 — 현재 상태와 충돌하는 요청 시 사용.

    409 Conflict exception.
    Raised when a write conflicts with existing data
    (e.g. deleting a client that still owns orders).

    Args:
        detail: 오류 메시지 (Error message, default: "Conflicting state")
    """

    def __init__(self, detail: str = "Conflicting state") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when request data is invalid beyond what Pydantic validation catches.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def status_code_for(exc: Exception) -> int:
    """예외를 응답 상태 코드로 분류합니다.

    Classify an exception into the status code carried by a failure envelope.

    Args:
        exc: 서비스 실행 중 발생한 예외 (Exception raised by a service operation)

    Returns:
        int: HTTP 상태 코드 (404/409/400 for domain errors, 500 otherwise)
    """
    if isinstance(exc, HTTPException):
        return exc.status_code
    # 제약 조건 위반 — unique/FK constraint violation reported by the database
    if isinstance(exc, IntegrityError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_message(exc: Exception) -> str:
    """예외에서 사용자 표시용 메시지를 추출합니다.

    Extract the human-readable part of an exception.
    HTTPException keeps its message in ``detail``; DBAPI errors are
    reduced to the driver's original message.
    """
    if isinstance(exc, HTTPException):
        return str(exc.detail)
    if isinstance(exc, IntegrityError):
        return str(exc.orig)
    return str(exc)
