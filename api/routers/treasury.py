"""
Treasury API Endpoints.

Owner-only withdrawal of collected payment funds.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import PresaleRuntime, get_caller, get_runtime
from api.models import ErrorResponse, WithdrawalRequest, WithdrawalResponse
from services.treasury_service import withdraw_funds

router = APIRouter()


@router.post(
    "/withdrawals",
    response_model=WithdrawalResponse,
    summary="Withdraw Funds",
    description="Move collected payment funds to a recipient. Owner only.",
    responses={403: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
def withdraw(
    request: WithdrawalRequest,
    caller: Optional[str] = Depends(get_caller),
    runtime: PresaleRuntime = Depends(get_runtime),
):
    with runtime.lock:
        result = withdraw_funds(runtime.presale, caller, request.recipient, request.amount)

    return WithdrawalResponse(
        recipient=result.recipient,
        amount=result.amount,
        funds_withdrawn=result.funds_withdrawn,
        funds_available=result.funds_available,
    )
