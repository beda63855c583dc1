"""
Treasury service for owner withdrawals.

Only the current owner may move collected payment funds out of presale
custody. By default the whole payment-token balance held by the presale is
withdrawn, including tokens sent to it outside of a purchase; an explicit
`amount` withdraws part of it.

funds_withdrawn only counts ledger funds: it grows by min(moved, available),
so funds_collected - funds_withdrawn never goes negative.

Withdrawals never change tokens_issued or the cap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from domain.access import require_address
from domain.errors import CollaboratorError, InvalidAmount, PresaleError, TransferFailed
from domain.events import FundsWithdrawn
from domain.presale import Presale

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WithdrawalResult:
    recipient: str
    amount: int
    funds_withdrawn: int  # cumulative, after this withdrawal
    funds_available: int  # ledger funds not yet withdrawn


def _custody_balance(presale: Presale) -> int:
    try:
        held = presale.transferer.balance_of(presale.address)
    except CollaboratorError as exc:
        raise TransferFailed(f"Payment balance lookup failed: {exc}") from exc
    if held < presale.state.funds_available:
        raise TransferFailed(
            f"Presale holds {held} payment units but the ledger expects {presale.state.funds_available}"
        )
    return held


def _resolve_amount(held: int, amount: Optional[int]) -> int:
    if held == 0:
        raise InvalidAmount("No funds to withdraw")
    if amount is None:
        return held
    if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
        raise InvalidAmount("Withdrawal amount must be a positive integer")
    if amount > held:
        raise InvalidAmount(f"Withdrawal amount exceeds held funds ({held})")
    return amount


def withdraw_funds(
    presale: Presale,
    caller: Optional[str],
    recipient: str,
    amount: Optional[int] = None,
) -> WithdrawalResult:
    """
    Withdraw collected payment funds to `recipient`.

    Args:
        presale: the presale entity
        caller: address invoking the withdrawal; must be the owner
        recipient: address receiving the funds
        amount: optional partial amount; defaults to the full held balance

    Returns:
        WithdrawalResult with the amount moved and updated counters

    Raises:
        Unauthorized: caller is not the owner (checked first)
        InvalidAddress: recipient is empty or the zero address
        InvalidAmount: nothing to withdraw, or amount out of range
        TransferFailed: custody holds less than the ledger expects, or the
            payment token transfer was rejected
    """
    try:
        presale.guard.require_owner(caller)
        require_address("recipient", recipient)
        held = _custody_balance(presale)
        to_withdraw = _resolve_amount(held, amount)
        staged = presale.state.record_withdrawal(min(to_withdraw, presale.state.funds_available))
    except PresaleError as exc:
        logger.warning(
            "Withdrawal rejected",
            extra={"caller": caller, "recipient": recipient, "error_code": exc.code},
        )
        raise

    try:
        presale.transferer.push(recipient, to_withdraw)
    except CollaboratorError as exc:
        logger.warning(
            "Withdrawal transfer failed",
            extra={"recipient": recipient, "amount": to_withdraw, "error": str(exc)},
        )
        raise TransferFailed(f"Payment transfer failed: {exc}") from exc

    presale.commit(staged, FundsWithdrawn(recipient=recipient, amount=to_withdraw))

    logger.info(
        "Funds withdrawn",
        extra={"recipient": recipient, "amount": to_withdraw, "funds_withdrawn": staged.funds_withdrawn},
    )

    return WithdrawalResult(
        recipient=recipient,
        amount=to_withdraw,
        funds_withdrawn=staged.funds_withdrawn,
        funds_available=staged.funds_available,
    )


__all__ = [
    "WithdrawalResult",
    "withdraw_funds",
]
