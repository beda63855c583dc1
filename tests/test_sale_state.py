"""
Tests for `domain/sale_state.py`.

Covers:
- Counters start at zero
- Transitions return new instances and leave the original unchanged
- funds_withdrawn can never exceed funds_collected
"""

from __future__ import annotations

import pytest

from domain.sale_state import SaleState


def test_initial_state_is_zero() -> None:
    state = SaleState.initial()

    assert state.tokens_issued == 0
    assert state.funds_collected == 0
    assert state.funds_withdrawn == 0
    assert state.funds_available == 0


def test_record_purchase_returns_new_instance() -> None:
    state = SaleState.initial()
    after = state.record_purchase(token_quantity=20, payment_amount=10)

    assert state == SaleState.initial()
    assert after.tokens_issued == 20
    assert after.funds_collected == 10
    assert after.funds_available == 10


def test_record_withdrawal_tracks_available_funds() -> None:
    state = SaleState(tokens_issued=20, funds_collected=10)
    after = state.record_withdrawal(4)

    assert after.funds_withdrawn == 4
    assert after.funds_available == 6
    assert after.tokens_issued == 20


def test_withdrawal_cannot_exceed_available() -> None:
    state = SaleState(tokens_issued=20, funds_collected=10, funds_withdrawn=8)

    with pytest.raises(ValueError):
        state.record_withdrawal(3)


def test_negative_inputs_are_rejected() -> None:
    state = SaleState.initial()

    with pytest.raises(ValueError):
        state.record_purchase(-1, 10)
    with pytest.raises(ValueError):
        state.record_purchase(1, -10)
    with pytest.raises(ValueError):
        state.record_withdrawal(-1)


def test_inconsistent_counters_are_rejected() -> None:
    with pytest.raises(ValueError):
        SaleState(funds_collected=5, funds_withdrawn=6)
    with pytest.raises(ValueError):
        SaleState(tokens_issued=-1)
