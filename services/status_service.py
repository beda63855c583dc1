"""
Status service: read-only snapshot of a presale.
"""

from __future__ import annotations

from dataclasses import dataclass

from domain.presale import Presale
from services.pricing_service import max_purchasable_payment


@dataclass(frozen=True, slots=True)
class SaleStatus:
    sale_token: str
    payment_token: str
    price_per_token: int
    cap: int
    sale_token_decimals: int
    payment_token_decimals: int
    tokens_issued: int
    tokens_remaining: int
    funds_collected: int
    funds_withdrawn: int
    funds_available: int
    max_payment: int
    paused: bool
    sold_out: bool
    owner: str


def get_sale_status(presale: Presale) -> SaleStatus:
    config = presale.config
    state = presale.state
    return SaleStatus(
        sale_token=config.sale_token,
        payment_token=config.payment_token,
        price_per_token=config.price_per_token,
        cap=config.cap,
        sale_token_decimals=config.sale_token_decimals,
        payment_token_decimals=config.payment_token_decimals,
        tokens_issued=state.tokens_issued,
        tokens_remaining=presale.cap_ledger.remaining(state.tokens_issued),
        funds_collected=state.funds_collected,
        funds_withdrawn=state.funds_withdrawn,
        funds_available=state.funds_available,
        max_payment=max_purchasable_payment(presale),
        paused=presale.paused,
        sold_out=presale.sold_out,
        owner=presale.owner,
    )


__all__ = ["SaleStatus", "get_sale_status"]
