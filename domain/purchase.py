"""
Domain: Purchase (ephemeral).

Created and consumed inside a single buy operation; never stored beyond its
effect on SaleState and the TokensPurchased event.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Purchase:
    buyer: str
    payment_amount: int  # payment-token smallest units
    token_quantity: int  # sale-token smallest units
