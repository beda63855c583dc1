"""
Presale API Endpoints.

Read-only endpoints: sale status, purchase quotes and the event log.
"""

from fastapi import APIRouter, Depends, Query

from api.dependencies import PresaleRuntime, get_runtime
from api.models import (
    EventListResponse,
    EventResponse,
    QuoteRequest,
    QuoteResponse,
    SaleStatusResponse,
)
from domain.pricing import to_display
from services.pricing_service import calculate_purchase_quote
from services.status_service import get_sale_status

router = APIRouter()


@router.get(
    "/presale",
    response_model=SaleStatusResponse,
    summary="Presale Status",
    description="Current price, cap, issuance and fund counters."
)
def presale_status(runtime: PresaleRuntime = Depends(get_runtime)):
    with runtime.lock:
        status = get_sale_status(runtime.presale)

    return SaleStatusResponse(
        sale_token=status.sale_token,
        payment_token=status.payment_token,
        price_per_token=status.price_per_token,
        price_per_token_display=to_display(status.price_per_token, status.payment_token_decimals),
        cap=status.cap,
        tokens_issued=status.tokens_issued,
        tokens_remaining=status.tokens_remaining,
        funds_collected=status.funds_collected,
        funds_withdrawn=status.funds_withdrawn,
        funds_available=status.funds_available,
        max_payment=status.max_payment,
        paused=status.paused,
        sold_out=status.sold_out,
        owner=status.owner,
    )


@router.post(
    "/quotes",
    response_model=QuoteResponse,
    summary="Quote Purchase",
    description="Preview the tokens a payment would buy. Nothing is reserved."
)
def quote_purchase(request: QuoteRequest, runtime: PresaleRuntime = Depends(get_runtime)):
    """
    **Example request:**
    ```json
    {"payment_amount": 10000000}
    ```

    At 0.50 per token this quotes 20 tokens (20 * 10^18 smallest units).
    """
    with runtime.lock:
        quote = calculate_purchase_quote(runtime.presale, request.payment_amount)

    return QuoteResponse(
        payment_amount=quote.payment_amount,
        token_quantity=quote.token_quantity,
        token_quantity_display=to_display(quote.token_quantity, runtime.presale.config.sale_token_decimals),
        cost=quote.cost,
        unspent_payment=quote.unspent_payment,
        within_cap=quote.within_cap,
        buys_anything=quote.buys_anything,
        remaining_after=quote.remaining_after,
        created_at=quote.created_at,
    )


@router.get(
    "/events",
    response_model=EventListResponse,
    summary="Presale Events",
    description="Committed presale notifications, most recent first."
)
def list_presale_events(
    limit: int = Query(100, ge=1, le=1000),
    runtime: PresaleRuntime = Depends(get_runtime),
):
    with runtime.lock:
        events = list(runtime.presale.events)

    recent = list(reversed(events))[:limit]
    return EventListResponse(
        events=[
            EventResponse(name=event.name, payload=event.to_payload(), occurred_at=event.occurred_at)
            for event in recent
        ],
        total_count=len(events),
    )
