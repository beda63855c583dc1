"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
Token amounts are integers in the asset's smallest unit; `*_display` fields
carry the same values in whole units for humans.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Status Models
# ============================================================================

class SaleStatusResponse(BaseModel):
    """Current presale configuration and counters."""
    sale_token: str
    payment_token: str
    price_per_token: int
    price_per_token_display: Decimal
    cap: int
    tokens_issued: int
    tokens_remaining: int
    funds_collected: int
    funds_withdrawn: int
    funds_available: int
    max_payment: int
    paused: bool
    sold_out: bool
    owner: str

    class Config:
        json_schema_extra = {
            "example": {
                "sale_token": "0x3000000000000000000000000000000000000003",
                "payment_token": "0x4000000000000000000000000000000000000004",
                "price_per_token": 500000,
                "price_per_token_display": "0.500000",
                "cap": 1000000000000000000000,
                "tokens_issued": 20000000000000000000,
                "tokens_remaining": 980000000000000000000,
                "funds_collected": 10000000,
                "funds_withdrawn": 0,
                "funds_available": 10000000,
                "max_payment": 490000000,
                "paused": False,
                "sold_out": False,
                "owner": "0x1000000000000000000000000000000000000001"
            }
        }


# ============================================================================
# Quote Models
# ============================================================================

class QuoteRequest(BaseModel):
    """Request to preview a purchase."""
    payment_amount: int = Field(
        ...,
        description="Payment in payment-token smallest units"
    )

    class Config:
        json_schema_extra = {
            "example": {"payment_amount": 10000000}
        }


class QuoteResponse(BaseModel):
    """Preview of what a payment buys right now."""
    payment_amount: int
    token_quantity: int
    token_quantity_display: Decimal
    cost: int
    unspent_payment: int
    within_cap: bool
    buys_anything: bool
    remaining_after: int
    created_at: datetime


# ============================================================================
# Purchase Models
# ============================================================================

class PurchaseRequest(BaseModel):
    """Request to buy sale tokens. The buyer is the caller address header."""
    payment_amount: int = Field(
        ...,
        description="Payment in payment-token smallest units; must be pre-approved"
    )

    class Config:
        json_schema_extra = {
            "example": {"payment_amount": 10000000}
        }


class PurchaseResponse(BaseModel):
    """Committed purchase."""
    buyer: str
    payment_amount: int
    token_quantity: int
    token_quantity_display: Decimal
    tokens_issued: int
    funds_collected: int

    class Config:
        json_schema_extra = {
            "example": {
                "buyer": "0x5000000000000000000000000000000000000005",
                "payment_amount": 10000000,
                "token_quantity": 20000000000000000000,
                "token_quantity_display": "20.000000000000000000",
                "tokens_issued": 20000000000000000000,
                "funds_collected": 10000000
            }
        }


# ============================================================================
# Treasury Models
# ============================================================================

class WithdrawalRequest(BaseModel):
    """Owner withdrawal of collected funds."""
    recipient: str = Field(..., description="Address receiving the funds")
    amount: Optional[int] = Field(
        None,
        description="Partial amount in payment-token smallest units; omit to withdraw everything"
    )


class WithdrawalResponse(BaseModel):
    recipient: str
    amount: int
    funds_withdrawn: int
    funds_available: int


# ============================================================================
# Admin / Event Models
# ============================================================================

class OwnershipTransferRequest(BaseModel):
    new_owner: str


class EventResponse(BaseModel):
    """Single presale notification."""
    name: str
    payload: Dict[str, Any]
    occurred_at: datetime


class EventListResponse(BaseModel):
    events: List[EventResponse]
    total_count: int


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    status_code: int

    class Config:
        json_schema_extra = {
            "example": {
                "error": "EXCEEDS_CAP",
                "detail": "Exceeds sale cap",
                "status_code": 409
            }
        }
