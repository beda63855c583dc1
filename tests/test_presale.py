"""
Tests for `domain/presale.py`.

Covers:
- commit is the single write path and guards monotonic issuance and the cap
- Listeners see post-commit state only
- A failing listener is logged and does not stop other listeners or the commit
- Owner-only pause / resume / ownership transfer
- restore loads persisted counters into a fresh presale only
"""

from __future__ import annotations

import pytest

from domain.errors import PresaleError, SaleHalted, Unauthorized
from domain.events import OwnershipTransferred, SalePaused, SaleResumed, TokensPurchased
from domain.sale_state import SaleState
from services.purchase_service import buy

USDC = 10**6
TOKEN = 10**18


def test_commit_rejects_decreasing_issuance(presale) -> None:
    presale.commit(SaleState(tokens_issued=5, funds_collected=1))

    with pytest.raises(ValueError):
        presale.commit(SaleState(tokens_issued=4, funds_collected=1))
    assert presale.state.tokens_issued == 5


def test_commit_rejects_issuance_above_cap(presale) -> None:
    with pytest.raises(ValueError):
        presale.commit(SaleState(tokens_issued=presale.config.cap + 1))


def test_listeners_see_committed_state(presale, usdc, buyer, presale_address) -> None:
    seen = []
    presale.subscribe(lambda p, event: seen.append((event.name, p.state.tokens_issued)))
    usdc.approve(buyer, presale_address, 10 * USDC)

    buy(presale, buyer, 10 * USDC)

    assert seen == [("TokensPurchased", 20 * TOKEN)]


def test_failing_listener_does_not_undo_commit(presale, owner, caplog) -> None:
    seen = []

    def broken(p, event):
        raise RuntimeError("db down")

    presale.subscribe(broken)
    presale.subscribe(lambda p, event: seen.append(event.name))

    with caplog.at_level("ERROR", logger="domain.presale"):
        event = presale.pause(owner)

    assert isinstance(event, SalePaused)
    assert presale.paused is True
    assert presale.events[-1] is event
    assert seen == ["SalePaused"]
    assert "Presale listener failed" in caplog.text


def test_pause_and_resume_are_owner_only(presale, owner, buyer) -> None:
    with pytest.raises(Unauthorized):
        presale.pause(buyer)

    paused = presale.pause(owner)
    assert isinstance(paused, SalePaused)
    assert presale.paused is True

    with pytest.raises(SaleHalted):
        presale.pause(owner)
    with pytest.raises(Unauthorized):
        presale.resume(buyer)

    resumed = presale.resume(owner)
    assert isinstance(resumed, SaleResumed)
    assert presale.paused is False

    with pytest.raises(PresaleError, match="not paused"):
        presale.resume(owner)


def test_transfer_ownership_emits_event(presale, owner) -> None:
    event = presale.transfer_ownership(owner, "0xnew")

    assert isinstance(event, OwnershipTransferred)
    assert presale.owner == "0xnew"
    assert presale.events[-1] is event


def test_restore_only_on_fresh_presale(presale, usdc, buyer, presale_address) -> None:
    presale.restore(SaleState(tokens_issued=40 * TOKEN, funds_collected=20 * USDC))
    assert presale.state.tokens_issued == 40 * TOKEN

    usdc.approve(buyer, presale_address, 10 * USDC)
    buy(presale, buyer, 10 * USDC)
    assert isinstance(presale.events[-1], TokensPurchased)

    with pytest.raises(RuntimeError):
        presale.restore(SaleState())


def test_restore_rejects_state_above_cap(presale) -> None:
    with pytest.raises(ValueError):
        presale.restore(SaleState(tokens_issued=presale.config.cap + 1))
