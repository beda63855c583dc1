"""
Purchase service for executing presale purchases.

Handles:
- Input validation (positive integer payment, sale not paused)
- Fixed-price conversion and cap admission
- Payment pull and token mint through the presale's collaborators
- All-or-nothing commit of the sale state

Order of operations inside one purchase:
1. tokens = pricing.tokens_for(payment)
2. cap admission (ExceedsCap -> nothing happens)
3. stage next state
4. pull payment from buyer into presale custody (TransferFailed -> nothing happens)
5. mint tokens to buyer (IssuanceFailed -> payment pushed back to buyer)
6. commit staged state and publish TokensPurchased
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from domain.access import require_address
from domain.errors import CollaboratorError, InvalidAmount, IssuanceFailed, PresaleError, TransferFailed
from domain.events import TokensPurchased
from domain.presale import Presale
from domain.purchase import Purchase

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PurchaseRequest:
    """Request to buy sale tokens with `payment_amount` payment-token smallest units."""

    buyer: str
    payment_amount: int


@dataclass(frozen=True, slots=True)
class PurchaseResult:
    """
    Result of a committed purchase.

    token_quantity: sale-token smallest units credited to the buyer
    tokens_issued / funds_collected: presale counters after the commit
    """

    buyer: str
    payment_amount: int
    token_quantity: int
    tokens_issued: int
    funds_collected: int


def _validate_request(request: PurchaseRequest) -> None:
    amount = request.payment_amount
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidAmount("Payment amount must be an integer")
    if amount <= 0:
        raise InvalidAmount("Payment amount must be greater than zero")
    require_address("buyer", request.buyer)


def _rollback_payment(presale: Presale, purchase: Purchase, cause: CollaboratorError) -> IssuanceFailed:
    """Return the pulled payment to the buyer after a failed mint."""

    error = IssuanceFailed(f"Token issuance failed: {cause}")
    try:
        presale.transferer.push(purchase.buyer, purchase.payment_amount)
    except CollaboratorError as rollback_exc:
        logger.error(
            "Payment rollback failed after issuance failure",
            extra={
                "buyer": purchase.buyer,
                "payment_amount": purchase.payment_amount,
                "issuance_error": str(cause),
                "rollback_error": str(rollback_exc),
            },
        )
        error.rollback_error = rollback_exc
    return error


def execute_purchase(presale: Presale, request: PurchaseRequest) -> PurchaseResult:
    """
    Execute a purchase with all-or-nothing semantics.

    Args:
        presale: the presale entity
        request: buyer and payment amount

    Returns:
        PurchaseResult describing the committed purchase

    Raises:
        InvalidAmount: non-positive payment, or payment too small for one unit
        SaleHalted: sale is paused
        ExceedsCap: issuance would exceed the cap
        TransferFailed: payment pull rejected (balance or allowance)
        IssuanceFailed: mint rejected; the payment has been returned

    Example:
        result = execute_purchase(presale, PurchaseRequest(buyer=addr, payment_amount=10 * 10**6))
        print(f"Bought {result.token_quantity} units")
    """
    try:
        _validate_request(request)
        presale.require_active()

        # 1. Price
        token_quantity = presale.pricing.tokens_for(request.payment_amount)
        if token_quantity == 0:
            raise InvalidAmount("Payment amount too small to buy any tokens")

        purchase = Purchase(
            buyer=request.buyer,
            payment_amount=request.payment_amount,
            token_quantity=token_quantity,
        )

        # 2. Cap admission
        state = presale.state
        presale.cap_ledger.require_admission(state.tokens_issued, token_quantity)

        # 3. Stage
        staged = state.record_purchase(token_quantity, purchase.payment_amount)
    except PresaleError as exc:
        logger.warning(
            "Purchase rejected",
            extra={"buyer": request.buyer, "payment_amount": request.payment_amount, "error_code": exc.code},
        )
        raise

    # 4. Pull payment
    try:
        presale.transferer.pull_from(purchase.buyer, presale.address, purchase.payment_amount)
    except CollaboratorError as exc:
        logger.warning(
            "Payment pull failed",
            extra={"buyer": purchase.buyer, "payment_amount": purchase.payment_amount, "error": str(exc)},
        )
        raise TransferFailed(f"Payment transfer failed: {exc}") from exc

    # 5. Mint
    try:
        presale.issuer.mint(purchase.buyer, purchase.token_quantity)
    except CollaboratorError as exc:
        raise _rollback_payment(presale, purchase, exc) from exc

    # 6. Commit
    presale.commit(
        staged,
        TokensPurchased(
            buyer=purchase.buyer,
            payment_amount=purchase.payment_amount,
            token_quantity=purchase.token_quantity,
        ),
    )

    logger.info(
        "Purchase committed",
        extra={
            "buyer": purchase.buyer,
            "payment_amount": purchase.payment_amount,
            "token_quantity": purchase.token_quantity,
            "tokens_issued": staged.tokens_issued,
        },
    )

    return PurchaseResult(
        buyer=purchase.buyer,
        payment_amount=purchase.payment_amount,
        token_quantity=purchase.token_quantity,
        tokens_issued=staged.tokens_issued,
        funds_collected=staged.funds_collected,
    )


def buy(presale: Presale, buyer: str, payment_amount: int) -> PurchaseResult:
    """Shorthand for execute_purchase(presale, PurchaseRequest(buyer, payment_amount))."""

    return execute_purchase(presale, PurchaseRequest(buyer=buyer, payment_amount=payment_amount))


__all__ = [
    "PurchaseRequest",
    "PurchaseResult",
    "execute_purchase",
    "buy",
]
