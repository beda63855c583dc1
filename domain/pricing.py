"""
Domain: Fixed-rate pricing.

Conversion:
    token_quantity = floor(payment_amount * 10**sale_token_decimals / price_per_token)

Truncation means a buyer never receives more tokens than paid for. Any
remainder stays with the presale without a matching token credit.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .errors import InvalidAmount
from .sale_config import SaleConfig


def _require_amount(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidAmount(f"{name} must be an integer")
    if value < 0:
        raise InvalidAmount(f"{name} must be >= 0")


def to_display(amount: int, decimals: int) -> Decimal:
    """
    Express a smallest-unit amount in whole units.

    Example:
        to_display(10_500_000, 6)  # Decimal("10.500000")
    """

    return Decimal(amount).scaleb(-decimals)


@dataclass(frozen=True, slots=True)
class PricingPolicy:
    """Pure conversion between payment units and sale-token units."""

    price_per_token: int
    sale_token_decimals: int

    @staticmethod
    def from_config(config: SaleConfig) -> "PricingPolicy":
        return PricingPolicy(
            price_per_token=config.price_per_token,
            sale_token_decimals=config.sale_token_decimals,
        )

    def tokens_for(self, payment_amount: int) -> int:
        _require_amount("payment_amount", payment_amount)
        return payment_amount * 10 ** self.sale_token_decimals // self.price_per_token

    def cost_of(self, token_quantity: int) -> int:
        """
        Smallest payment that converts to at least `token_quantity` tokens.

        Inverse of tokens_for with ceiling rounding:
            cost_of(q) = ceil(q * price_per_token / 10**sale_token_decimals)
        """

        _require_amount("token_quantity", token_quantity)
        return -(-token_quantity * self.price_per_token // 10 ** self.sale_token_decimals)
