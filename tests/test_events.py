"""
Tests for `domain/events.py`.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from domain.events import FundsWithdrawn, TokensPurchased


def test_event_payload_serializes_amounts_as_strings() -> None:
    event = TokensPurchased(buyer="0xbuyer", payment_amount=10 * 10**6, token_quantity=20 * 10**18)

    assert event.name == "TokensPurchased"
    assert event.to_payload() == {
        "buyer": "0xbuyer",
        "payment_amount": "10000000",
        "token_quantity": "20000000000000000000",
    }
    assert event.occurred_at.utcoffset() == timedelta(0)


def test_event_timestamp_must_be_utc() -> None:
    with pytest.raises(ValueError):
        FundsWithdrawn(recipient="0xowner", amount=1, occurred_at=datetime(2025, 1, 1))
    with pytest.raises(ValueError):
        FundsWithdrawn(
            recipient="0xowner",
            amount=1,
            occurred_at=datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=2))),
        )
