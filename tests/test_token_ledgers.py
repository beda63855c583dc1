"""
Tests for `repositories/token_ledgers.py`.

Covers:
- Minting requires the minter role, granted/revoked by the token admin
- transfer_from is bounded by allowance and balance, and spends allowance
- Failed operations leave balances untouched
- Adapters forward to the right ledger operation
"""

from __future__ import annotations

import pytest

from domain.collaborators import TokenIssuer, TokenTransferer
from domain.errors import CollaboratorError
from repositories.token_ledgers import (
    InsufficientAllowance,
    InsufficientBalance,
    MintableToken,
    MissingMinterRole,
    PaymentTokenTransferer,
    SaleTokenIssuer,
    StablecoinToken,
    TokenLedgerError,
)


def test_mint_requires_minter_role() -> None:
    token = MintableToken(admin="0xadmin")

    with pytest.raises(MissingMinterRole):
        token.mint("0xpresale", "0xbuyer", 5)

    token.grant_minter_role("0xpresale", caller="0xadmin")
    token.mint("0xpresale", "0xbuyer", 5)

    assert token.balance_of("0xbuyer") == 5
    assert token.total_supply == 5


def test_only_admin_manages_minters() -> None:
    token = MintableToken(admin="0xadmin")

    with pytest.raises(TokenLedgerError):
        token.grant_minter_role("0xmallory", caller="0xmallory")

    token.grant_minter_role("0xpresale", caller="0xadmin")
    token.revoke_minter_role("0xpresale", caller="0xadmin")
    assert token.has_minter_role("0xpresale") is False


@pytest.mark.parametrize("caller", [None, "", "0xmallory"])
def test_minter_role_changes_require_admin_caller(caller) -> None:
    token = MintableToken(admin="0xadmin")
    token.grant_minter_role("0xpresale", caller="0xadmin")

    with pytest.raises(TokenLedgerError, match="not the token admin"):
        token.grant_minter_role("0xattacker", caller=caller)
    with pytest.raises(TokenLedgerError, match="not the token admin"):
        token.revoke_minter_role("0xpresale", caller=caller)

    assert token.has_minter_role("0xattacker") is False
    assert token.has_minter_role("0xpresale") is True


def test_transfer_from_spends_allowance() -> None:
    usdc = StablecoinToken()
    usdc.mint("0xbuyer", 100)
    usdc.approve("0xbuyer", "0xpresale", 60)

    usdc.transfer_from("0xpresale", "0xbuyer", "0xpresale", 40)

    assert usdc.balance_of("0xbuyer") == 60
    assert usdc.balance_of("0xpresale") == 40
    assert usdc.allowance("0xbuyer", "0xpresale") == 20


def test_transfer_from_rejects_missing_allowance_without_side_effects() -> None:
    usdc = StablecoinToken()
    usdc.mint("0xbuyer", 100)
    usdc.approve("0xbuyer", "0xpresale", 10)

    with pytest.raises(InsufficientAllowance):
        usdc.transfer_from("0xpresale", "0xbuyer", "0xpresale", 11)

    assert usdc.balance_of("0xbuyer") == 100
    assert usdc.allowance("0xbuyer", "0xpresale") == 10


def test_transfer_from_rejects_missing_balance_without_side_effects() -> None:
    usdc = StablecoinToken()
    usdc.mint("0xbuyer", 5)
    usdc.approve("0xbuyer", "0xpresale", 50)

    with pytest.raises(InsufficientBalance):
        usdc.transfer_from("0xpresale", "0xbuyer", "0xpresale", 6)

    assert usdc.balance_of("0xbuyer") == 5
    assert usdc.allowance("0xbuyer", "0xpresale") == 50


def test_ledger_errors_are_collaborator_errors() -> None:
    assert issubclass(TokenLedgerError, CollaboratorError)
    with pytest.raises(CollaboratorError):
        StablecoinToken().transfer("0xnobody", "0xbuyer", 1)


def test_adapters_implement_capability_protocols() -> None:
    sale = MintableToken(admin="0xadmin")
    sale.grant_minter_role("0xpresale", caller="0xadmin")
    usdc = StablecoinToken()
    issuer = SaleTokenIssuer(sale, minter="0xpresale")
    transferer = PaymentTokenTransferer(usdc, spender="0xpresale")

    assert isinstance(issuer, TokenIssuer)
    assert isinstance(transferer, TokenTransferer)

    usdc.mint("0xbuyer", 30)
    usdc.approve("0xbuyer", "0xpresale", 30)
    transferer.pull_from("0xbuyer", "0xpresale", 30)
    transferer.push("0xowner", 12)
    issuer.mint("0xbuyer", 7)

    assert transferer.balance_of("0xpresale") == 18
    assert usdc.balance_of("0xowner") == 12
    assert sale.balance_of("0xbuyer") == 7
