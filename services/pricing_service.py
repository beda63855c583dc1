"""
Pricing service for purchase quotes.

Previews what a payment would buy at the presale's fixed price without
touching any state or collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from domain.presale import Presale
from domain.time import utc_now


@dataclass(frozen=True, slots=True)
class PurchaseQuote:
    """
    Quote for a single prospective purchase.

    cost: payment actually needed for `token_quantity` (ceil of the inverse
          conversion), always <= payment_amount
    unspent_payment: payment_amount - cost; kept by the presale with no token
          credit if the buyer pays the full payment_amount
    within_cap: whether the purchase would be admitted right now
    remaining_after: cap capacity left after the purchase (0 if not admitted)
    """

    payment_amount: int
    token_quantity: int
    cost: int
    unspent_payment: int
    within_cap: bool
    remaining_after: int
    created_at: datetime

    @property
    def buys_anything(self) -> bool:
        return self.token_quantity > 0


def calculate_purchase_quote(presale: Presale, payment_amount: int) -> PurchaseQuote:
    """
    Calculate a quote for `payment_amount` payment-token smallest units.

    Raises:
        InvalidAmount: if payment_amount is negative or not an integer

    Example:
        quote = calculate_purchase_quote(presale, 10 * 10**6)
        print(f"{quote.token_quantity} units for {quote.cost}")
    """

    token_quantity = presale.pricing.tokens_for(payment_amount)
    cost = presale.pricing.cost_of(token_quantity)
    admission = presale.cap_ledger.admit(presale.state.tokens_issued, token_quantity)

    return PurchaseQuote(
        payment_amount=payment_amount,
        token_quantity=token_quantity,
        cost=cost,
        unspent_payment=payment_amount - cost,
        within_cap=admission.accepted,
        remaining_after=admission.remaining - token_quantity if admission.accepted else 0,
        created_at=utc_now(),
    )


def max_purchasable_payment(presale: Presale) -> int:
    """
    Largest payment that still fits under the cap.

    Any payment up to this value converts to at most the remaining capacity.
    """

    remaining = presale.cap_ledger.remaining(presale.state.tokens_issued)
    unit = presale.config.sale_token_unit
    price = presale.config.price_per_token
    # floor(p * unit / price) <= remaining  <=>  p < (remaining + 1) * price / unit
    return ((remaining + 1) * price - 1) // unit


__all__ = [
    "PurchaseQuote",
    "calculate_purchase_quote",
    "max_purchasable_payment",
]
