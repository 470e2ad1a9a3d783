"""타임스탬프 유틸리티 — 생성/수정 일시 기록.

Timestamp utilities for creation/modification stamping.
"""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """현재 UTC 시각 (Current time in UTC, timezone-aware)."""
    return datetime.now(timezone.utc)


def next_modification(previous: datetime | None) -> datetime:
    """이전 수정 일시보다 엄격히 큰 현재 시각을 반환합니다.

    Return the current UTC time, nudged forward when the clock has not
    moved past ``previous``, so modification timestamps strictly increase.

    Args:
        previous: 직전 수정 일시 — 드라이버에 따라 naive로 돌아올 수 있음
                  (Previous modification time; naive values are read as UTC)

    Returns:
        datetime: 새 수정 일시 (New modification timestamp)
    """
    now: datetime = utc_now()
    if previous is None:
        return now
    # SQLite 등은 tzinfo 없이 반환 — naive values come back from drivers without tz support
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
