"""
Tests for `domain/cap_ledger.py`.

Covers:
- Admission iff tokens_issued + quantity <= cap (inclusive boundary)
- The ledger is a pure check (no counters change)
- require_admission raises ExceedsCap with the boundary message
"""

from __future__ import annotations

import pytest

from domain.cap_ledger import CapLedger
from domain.errors import ExceedsCap

LEDGER = CapLedger(cap=1000)


def test_purchase_under_cap_is_accepted() -> None:
    admission = LEDGER.admit(tokens_issued=0, token_quantity=20)

    assert admission.accepted is True
    assert admission.remaining == 1000
    assert admission.reason is None


def test_purchase_landing_exactly_on_cap_is_accepted() -> None:
    assert LEDGER.admit(tokens_issued=0, token_quantity=1000).accepted is True
    assert LEDGER.admit(tokens_issued=980, token_quantity=20).accepted is True


def test_purchase_over_cap_is_rejected() -> None:
    admission = LEDGER.admit(tokens_issued=980, token_quantity=21)

    assert admission.accepted is False
    assert admission.remaining == 20
    assert admission.reason == "Exceeds sale cap"


def test_any_positive_purchase_fails_when_sold_out() -> None:
    assert LEDGER.is_sold_out(1000) is True
    assert LEDGER.admit(tokens_issued=1000, token_quantity=1).accepted is False
    assert LEDGER.remaining(1000) == 0


def test_require_admission_raises_exceeds_cap() -> None:
    with pytest.raises(ExceedsCap, match="Exceeds sale cap"):
        LEDGER.require_admission(tokens_issued=999, token_quantity=2)

    assert LEDGER.require_admission(tokens_issued=999, token_quantity=1).accepted is True
