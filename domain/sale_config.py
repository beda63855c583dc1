"""
Domain: Sale configuration.

SaleConfig is fixed at presale construction and never mutated afterwards.

Units:
- price_per_token: payment-token smallest units per WHOLE sale token
  (e.g. 500000 = 0.50 of a 6-decimal stablecoin).
- cap: maximum cumulative issuance in sale-token smallest units
  (e.g. 1000 * 10**18 for 1000 tokens with 18 decimals).
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_DECIMALS = 36


@dataclass(frozen=True, slots=True)
class SaleConfig:
    sale_token: str
    payment_token: str
    price_per_token: int
    cap: int
    sale_token_decimals: int = 18
    payment_token_decimals: int = 6

    def __post_init__(self) -> None:
        if not self.sale_token:
            raise ValueError("sale_token address is required")
        if not self.payment_token:
            raise ValueError("payment_token address is required")
        if self.sale_token == self.payment_token:
            raise ValueError("sale_token and payment_token must differ")

        for name in ("price_per_token", "cap", "sale_token_decimals", "payment_token_decimals"):
            value = getattr(self, name)
            # bool is an int subclass; it is never a valid amount here.
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer")

        if self.price_per_token <= 0:
            raise ValueError("price_per_token must be > 0")
        if self.cap <= 0:
            raise ValueError("cap must be > 0")
        if not 0 <= self.sale_token_decimals <= MAX_DECIMALS:
            raise ValueError(f"sale_token_decimals must be within [0, {MAX_DECIMALS}]")
        if not 0 <= self.payment_token_decimals <= MAX_DECIMALS:
            raise ValueError(f"payment_token_decimals must be within [0, {MAX_DECIMALS}]")

    @property
    def sale_token_unit(self) -> int:
        """Smallest units in one whole sale token."""
        return 10 ** self.sale_token_decimals
