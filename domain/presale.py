"""
Domain: Presale entity.

Owns the sale configuration (fixed at construction) and the sale state
(replaced only through `commit`). External effects are delegated to the
token issuer and payment transferer supplied at construction; the purchase
and treasury services drive them and commit the staged state afterwards.

Listeners are called after the state swap, so any reader sees a complete
post-commit snapshot and never an intermediate state. A failing listener is
logged and skipped: once committed, an operation is never reported as failed.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .access import AccessGuard, require_address
from .cap_ledger import CapLedger
from .collaborators import TokenIssuer, TokenTransferer
from .errors import PresaleError, SaleHalted
from .events import OwnershipTransferred, PresaleEvent, SalePaused, SaleResumed
from .pricing import PricingPolicy
from .sale_config import SaleConfig
from .sale_state import SaleState

logger = logging.getLogger(__name__)

PresaleListener = Callable[["Presale", PresaleEvent], None]


class Presale:
    def __init__(
        self,
        config: SaleConfig,
        owner: str,
        issuer: TokenIssuer,
        transferer: TokenTransferer,
        address: str,
    ) -> None:
        self.config = config
        self.address = require_address("address", address)
        self.issuer = issuer
        self.transferer = transferer
        self.pricing = PricingPolicy.from_config(config)
        self.cap_ledger = CapLedger(cap=config.cap)
        self.guard = AccessGuard(owner)

        self._state = SaleState.initial()
        self._paused = False
        self._events: List[PresaleEvent] = []
        self._listeners: List[PresaleListener] = []

    @property
    def state(self) -> SaleState:
        return self._state

    @property
    def owner(self) -> str:
        return self.guard.owner

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def events(self) -> Tuple[PresaleEvent, ...]:
        return tuple(self._events)

    @property
    def sold_out(self) -> bool:
        return self.cap_ledger.is_sold_out(self._state.tokens_issued)

    def subscribe(self, listener: PresaleListener) -> None:
        self._listeners.append(listener)

    def restore(self, state: SaleState) -> None:
        """
        Load previously persisted counters into a fresh presale.

        Only allowed before anything has been committed.
        """

        if self._events or self._state != SaleState.initial():
            raise RuntimeError("restore is only allowed on a fresh presale")
        if state.tokens_issued > self.config.cap:
            raise ValueError("persisted tokens_issued exceeds cap")
        self._state = state

    def commit(self, state: SaleState, *events: PresaleEvent) -> None:
        """Single write path: swap in the staged state, then publish events."""

        if state.tokens_issued < self._state.tokens_issued:
            raise ValueError("tokens_issued cannot decrease")
        if state.tokens_issued > self.config.cap:
            raise ValueError("tokens_issued cannot exceed cap")

        self._state = state
        self._events.extend(events)
        for event in events:
            for listener in self._listeners:
                try:
                    listener(self, event)
                except Exception:
                    logger.exception(
                        "Presale listener failed",
                        extra={"event": event.name, "listener": repr(listener)},
                    )

    def require_active(self) -> None:
        if self._paused:
            raise SaleHalted()

    # Administrative operations (owner only)

    def pause(self, caller: Optional[str]) -> SalePaused:
        self.guard.require_owner(caller)
        self.require_active()
        self._paused = True
        event = SalePaused(by=caller)
        self.commit(self._state, event)
        return event

    def resume(self, caller: Optional[str]) -> SaleResumed:
        self.guard.require_owner(caller)
        if not self._paused:
            raise PresaleError("Sale is not paused")
        self._paused = False
        event = SaleResumed(by=caller)
        self.commit(self._state, event)
        return event

    def transfer_ownership(self, caller: Optional[str], new_owner: str) -> OwnershipTransferred:
        event = self.guard.transfer_ownership(caller, new_owner)
        self.commit(self._state, event)
        return event
