"""
Domain: Presale notifications.

Events are emitted only after a state change commits. Each event is an
immutable record with a UTC timestamp and a flat payload suitable for
persistence or an HTTP response.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict

from .time import require_utc_timestamp, utc_now


@dataclass(frozen=True, slots=True)
class PresaleEvent:
    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)

    def __post_init__(self) -> None:
        require_utc_timestamp("occurred_at", self.occurred_at)

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_payload(self) -> Dict[str, Any]:
        """Event fields except the timestamp; large ints are kept as str."""

        payload: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "occurred_at":
                continue
            value = getattr(self, f.name)
            payload[f.name] = str(value) if isinstance(value, int) and not isinstance(value, bool) else value
        return payload


@dataclass(frozen=True, slots=True)
class TokensPurchased(PresaleEvent):
    buyer: str
    payment_amount: int
    token_quantity: int


@dataclass(frozen=True, slots=True)
class FundsWithdrawn(PresaleEvent):
    recipient: str
    amount: int


@dataclass(frozen=True, slots=True)
class OwnershipTransferred(PresaleEvent):
    previous_owner: str
    new_owner: str


@dataclass(frozen=True, slots=True)
class SalePaused(PresaleEvent):
    by: str


@dataclass(frozen=True, slots=True)
class SaleResumed(PresaleEvent):
    by: str


__all__ = [
    "PresaleEvent",
    "TokensPurchased",
    "FundsWithdrawn",
    "OwnershipTransferred",
    "SalePaused",
    "SaleResumed",
]
