"""
Purchases API Endpoints.

The buyer is identified by the `X-Caller-Address` header and must have
approved the presale address on the payment token beforehand.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import PresaleRuntime, get_caller, get_runtime
from api.models import ErrorResponse, PurchaseRequest as APIPurchaseRequest, PurchaseResponse
from domain.errors import InvalidAddress
from domain.pricing import to_display
from services.purchase_service import PurchaseRequest, execute_purchase

router = APIRouter()


@router.post(
    "/purchases",
    response_model=PurchaseResponse,
    summary="Buy Tokens",
    description="Pay with the approved payment token and receive sale tokens at the fixed price.",
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        423: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def buy_tokens(
    request: APIPurchaseRequest,
    caller: Optional[str] = Depends(get_caller),
    runtime: PresaleRuntime = Depends(get_runtime),
):
    """
    Execute a purchase.

    **All-or-nothing:**
    Either the payment is pulled, the tokens are minted and the counters are
    updated, or none of it happens.

    **Failure codes:**
    - `EXCEEDS_CAP` (409): purchase would push issuance above the cap
    - `TRANSFER_FAILED` (402): balance or allowance too low
    - `ISSUANCE_FAILED` (502): mint rejected; payment returned
    - `SALE_HALTED` (423): sale is paused
    - `INVALID_AMOUNT` (400): zero/negative payment or too small for one unit
    """
    if not caller:
        raise InvalidAddress("X-Caller-Address header is required")

    with runtime.lock:
        result = execute_purchase(
            runtime.presale,
            PurchaseRequest(buyer=caller, payment_amount=request.payment_amount),
        )

    return PurchaseResponse(
        buyer=result.buyer,
        payment_amount=result.payment_amount,
        token_quantity=result.token_quantity,
        token_quantity_display=to_display(result.token_quantity, runtime.presale.config.sale_token_decimals),
        tokens_issued=result.tokens_issued,
        funds_collected=result.funds_collected,
    )
