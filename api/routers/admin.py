"""
Admin API Endpoints.

Owner-only controls: pause, resume and ownership transfer.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import PresaleRuntime, get_caller, get_runtime
from api.models import EventResponse, OwnershipTransferRequest
from domain.events import PresaleEvent

router = APIRouter(prefix="/admin")


def _event_response(event: PresaleEvent) -> EventResponse:
    return EventResponse(name=event.name, payload=event.to_payload(), occurred_at=event.occurred_at)


@router.post("/pause", response_model=EventResponse, summary="Pause Sale")
def pause_sale(caller: Optional[str] = Depends(get_caller), runtime: PresaleRuntime = Depends(get_runtime)):
    with runtime.lock:
        event = runtime.presale.pause(caller)
    return _event_response(event)


@router.post("/resume", response_model=EventResponse, summary="Resume Sale")
def resume_sale(caller: Optional[str] = Depends(get_caller), runtime: PresaleRuntime = Depends(get_runtime)):
    with runtime.lock:
        event = runtime.presale.resume(caller)
    return _event_response(event)


@router.post("/owner", response_model=EventResponse, summary="Transfer Ownership")
def transfer_ownership(
    request: OwnershipTransferRequest,
    caller: Optional[str] = Depends(get_caller),
    runtime: PresaleRuntime = Depends(get_runtime),
):
    with runtime.lock:
        event = runtime.presale.transfer_ownership(caller, request.new_owner)
    return _event_response(event)
