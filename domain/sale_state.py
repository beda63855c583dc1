"""
Domain: Sale state counters.

Counters:
- tokens_issued: cumulative sale-token smallest units minted by the presale
- funds_collected: cumulative payment smallest units received
- funds_withdrawn: cumulative payment smallest units paid out by the owner

Invariants:
- All counters are >= 0.
- tokens_issued never decreases.
- funds_collected - funds_withdrawn >= 0 at all times.

The cap bound (tokens_issued <= cap) is checked by the cap ledger before a
purchase is staged; SaleState itself has no knowledge of the configuration.

Transitions return a new instance so the engine can stage the next state,
perform external calls, and only then swap it in.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SaleState:
    tokens_issued: int = 0
    funds_collected: int = 0
    funds_withdrawn: int = 0

    def __post_init__(self) -> None:
        if self.tokens_issued < 0:
            raise ValueError("tokens_issued must be >= 0")
        if self.funds_collected < 0 or self.funds_withdrawn < 0:
            raise ValueError("fund counters must be >= 0")
        if self.funds_withdrawn > self.funds_collected:
            raise ValueError("funds_withdrawn cannot exceed funds_collected")

    @staticmethod
    def initial() -> "SaleState":
        return SaleState()

    @property
    def funds_available(self) -> int:
        """Payment units collected and not yet withdrawn."""
        return self.funds_collected - self.funds_withdrawn

    def record_purchase(self, token_quantity: int, payment_amount: int) -> "SaleState":
        if token_quantity < 0:
            raise ValueError("token_quantity must be >= 0")
        if payment_amount < 0:
            raise ValueError("payment_amount must be >= 0")
        return SaleState(
            tokens_issued=self.tokens_issued + token_quantity,
            funds_collected=self.funds_collected + payment_amount,
            funds_withdrawn=self.funds_withdrawn,
        )

    def record_withdrawal(self, amount: int) -> "SaleState":
        if amount < 0:
            raise ValueError("amount must be >= 0")
        if amount > self.funds_available:
            raise ValueError("amount exceeds funds available")
        return SaleState(
            tokens_issued=self.tokens_issued,
            funds_collected=self.funds_collected,
            funds_withdrawn=self.funds_withdrawn + amount,
        )
