"""
Presale repository (persistence).

Stores sale-state snapshots and the event log in Supabase. It does not
enforce presale rules; the domain and services have already applied them by
the time anything reaches this module.

Amounts are written as strings: sale-token quantities routinely exceed the
64-bit integer range of the database columns and of JSON number parsers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
from uuid import UUID, uuid4

from domain.events import PresaleEvent
from domain.presale import Presale
from domain.sale_state import SaleState
from domain.time import require_utc_timestamp
from repositories.client import get_supabase

# Supabase table names.
# Keep these aligned with your database schema.
_STATE_TABLE: str = "presale_state"
_EVENTS_TABLE: str = "presale_events"


@dataclass(frozen=True, slots=True)
class StoredEvent:
    event_id: UUID
    presale_id: str
    event_name: str
    payload: Mapping[str, Any]
    occurred_at: datetime


def _to_iso_utc(dt: datetime, *, name: str) -> str:
    require_utc_timestamp(name, dt)
    return dt.astimezone(timezone.utc).isoformat()


def _parse_utc_datetime(value: Any) -> datetime:
    """
    Parse a Supabase timestamp into a timezone-aware UTC datetime.

    Supabase commonly returns ISO-8601 strings, sometimes with a trailing 'Z'.
    """

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    else:
        raise TypeError(f"Unsupported timestamp type: {type(value)!r}")

    if dt.tzinfo is None or dt.utcoffset() is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _check(response: Any, action: str) -> List[Mapping[str, Any]]:
    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to {action}: {error}")
    return getattr(response, "data", None) or []


def save_sale_state(presale_id: str, state: SaleState, client: Any = None) -> None:
    """Upsert the counters for `presale_id`."""

    client = client or get_supabase()
    payload: Dict[str, Any] = {
        "presale_id": presale_id,
        "tokens_issued": str(state.tokens_issued),
        "funds_collected": str(state.funds_collected),
        "funds_withdrawn": str(state.funds_withdrawn),
        "updated_at_utc": datetime.now(timezone.utc).isoformat(),
    }
    response = client.table(_STATE_TABLE).upsert(payload).execute()
    _check(response, "save presale state")


def load_sale_state(presale_id: str, client: Any = None) -> Optional[SaleState]:
    """
    Fetch the persisted counters.

    Returns:
        SaleState or None if nothing was saved for this presale yet
    """

    client = client or get_supabase()
    response = (
        client.table(_STATE_TABLE)
        .select("*")
        .eq("presale_id", presale_id)
        .limit(1)
        .execute()
    )
    rows = _check(response, "load presale state")
    if not rows:
        return None

    row = rows[0]
    return SaleState(
        tokens_issued=int(row["tokens_issued"]),
        funds_collected=int(row["funds_collected"]),
        funds_withdrawn=int(row["funds_withdrawn"]),
    )


def record_event(presale_id: str, event: PresaleEvent, client: Any = None) -> StoredEvent:
    client = client or get_supabase()
    event_id = uuid4()
    payload = event.to_payload()

    response = (
        client.table(_EVENTS_TABLE)
        .insert(
            {
                "event_id": str(event_id),
                "presale_id": presale_id,
                "event_name": event.name,
                "payload": payload,
                "occurred_at_utc": _to_iso_utc(event.occurred_at, name="occurred_at"),
            }
        )
        .execute()
    )
    _check(response, "record presale event")

    return StoredEvent(
        event_id=event_id,
        presale_id=presale_id,
        event_name=event.name,
        payload=payload,
        occurred_at=event.occurred_at,
    )


def list_events(presale_id: str, limit: int = 100, client: Any = None) -> List[StoredEvent]:
    """Most recent events first."""

    client = client or get_supabase()
    response = (
        client.table(_EVENTS_TABLE)
        .select("*")
        .eq("presale_id", presale_id)
        .order("occurred_at_utc", desc=True)
        .limit(limit)
        .execute()
    )
    rows = _check(response, "list presale events")
    return [
        StoredEvent(
            event_id=UUID(str(row["event_id"])),
            presale_id=str(row["presale_id"]),
            event_name=str(row["event_name"]),
            payload=row.get("payload") or {},
            occurred_at=_parse_utc_datetime(row["occurred_at_utc"]),
        )
        for row in rows
    ]


class PresaleEventRecorder:
    """
    Presale listener that persists each committed event and the post-commit
    state snapshot.

    Usage:
        presale.subscribe(PresaleEventRecorder("presale-main"))
    """

    def __init__(self, presale_id: str, client: Any = None) -> None:
        self.presale_id = presale_id
        self.client = client

    def __call__(self, presale: Presale, event: PresaleEvent) -> None:
        record_event(self.presale_id, event, client=self.client)
        save_sale_state(self.presale_id, presale.state, client=self.client)


__all__ = [
    "StoredEvent",
    "save_sale_state",
    "load_sale_state",
    "record_event",
    "list_events",
    "PresaleEventRecorder",
]
