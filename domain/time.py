"""
Domain time helpers.

Event timestamps in the presale ledger are always UTC. Callers may pass an
explicit timestamp; otherwise `utc_now()` is used at the point of commit.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def require_utc_timestamp(name: str, value: datetime) -> None:
    """
    Reject naive timestamps and timestamps with a non-zero UTC offset.

    Raises:
        ValueError: naming the offending field
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware (UTC)")
    if value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a UTC timestamp (offset 0)")
