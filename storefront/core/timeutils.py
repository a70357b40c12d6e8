from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    # SQLite guarda datetimes sem fuso; tudo é gravado como UTC "naive".
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
