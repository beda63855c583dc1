"""
Domain: Presale error kinds.

Every failure of a presale operation is terminal for that call and leaves the
sale state untouched. Each error carries a stable `code` so callers (HTTP
layer, scripts, tests) can tell causes apart without parsing messages.

Messages for the cap and ownership checks are kept identical to the values
observed at the contract boundary:
- "Exceeds sale cap"
- "Ownable: caller is not the owner"
"""

from __future__ import annotations

from typing import Optional


class PresaleError(Exception):
    """Base class for all presale operation failures."""

    code: str = "PRESALE_ERROR"
    message: str = "Presale operation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class InvalidAmount(PresaleError):
    """Zero, negative, non-integer, or otherwise unusable amount."""

    code = "INVALID_AMOUNT"
    message = "Invalid amount"


class ExceedsCap(PresaleError):
    """Purchase would push cumulative issuance above the cap."""

    code = "EXCEEDS_CAP"
    message = "Exceeds sale cap"


class TransferFailed(PresaleError):
    """Payment token transfer was rejected (balance or allowance)."""

    code = "TRANSFER_FAILED"
    message = "Payment transfer failed"


class IssuanceFailed(PresaleError):
    """Sale token mint was rejected (e.g. minter capability revoked)."""

    code = "ISSUANCE_FAILED"
    message = "Token issuance failed"

    # Set when returning the pulled payment to the buyer also failed.
    rollback_error: Optional[Exception] = None


class Unauthorized(PresaleError):
    """Caller is not the owner."""

    code = "UNAUTHORIZED"
    message = "Ownable: caller is not the owner"


class SaleHalted(PresaleError):
    """Sale is paused by the owner."""

    code = "SALE_HALTED"
    message = "Sale is paused"


class InvalidAddress(PresaleError):
    code = "INVALID_ADDRESS"
    message = "Invalid address"


class CollaboratorError(Exception):
    """
    Raised by external collaborators (token issuer, payment transferer).

    The purchase engine and treasury translate these into TransferFailed or
    IssuanceFailed; they never leak out of a presale operation unwrapped.
    """


__all__ = [
    "PresaleError",
    "InvalidAmount",
    "ExceedsCap",
    "TransferFailed",
    "IssuanceFailed",
    "Unauthorized",
    "SaleHalted",
    "InvalidAddress",
    "CollaboratorError",
]
