"""
Domain: Cap admission check.

A purchase of `token_quantity` is admitted iff

    tokens_issued + token_quantity <= cap

The boundary is inclusive: a purchase landing exactly on the cap is accepted.
The ledger never mutates counters; committing the increment is the purchase
engine's job so that check and commit stay under one owner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ExceedsCap


@dataclass(frozen=True, slots=True)
class Admission:
    accepted: bool
    remaining: int  # capacity left before the purchase
    reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CapLedger:
    cap: int

    def remaining(self, tokens_issued: int) -> int:
        return max(self.cap - tokens_issued, 0)

    def is_sold_out(self, tokens_issued: int) -> bool:
        return tokens_issued >= self.cap

    def admit(self, tokens_issued: int, token_quantity: int) -> Admission:
        remaining = self.remaining(tokens_issued)
        if tokens_issued + token_quantity <= self.cap:
            return Admission(accepted=True, remaining=remaining)
        return Admission(accepted=False, remaining=remaining, reason=ExceedsCap.message)

    def require_admission(self, tokens_issued: int, token_quantity: int) -> Admission:
        """Admit or raise ExceedsCap."""

        admission = self.admit(tokens_issued, token_quantity)
        if not admission.accepted:
            raise ExceedsCap()
        return admission
