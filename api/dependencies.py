"""
FastAPI dependencies.

The API serves one presale held in process memory. Sync endpoints run on a
thread pool, so every state-changing request takes `runtime.lock` to keep
operations serialized.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from fastapi import Header

from api.settings import PresaleSettings, load_settings
from services.presale_factory import PresaleDeployment, deploy_in_memory_presale


@dataclass
class PresaleRuntime:
    deployment: PresaleDeployment
    settings: PresaleSettings
    lock: threading.Lock = field(default_factory=threading.Lock)

    @property
    def presale(self):
        return self.deployment.presale


def build_runtime(settings: PresaleSettings) -> PresaleRuntime:
    deployment = deploy_in_memory_presale(
        owner=settings.owner,
        presale_address=settings.presale_address,
        price_per_token=settings.price_per_token,
        cap=settings.cap,
        sale_token_address=settings.sale_token_address,
        payment_token_address=settings.payment_token_address,
        sale_token_decimals=settings.sale_token_decimals,
        payment_token_decimals=settings.payment_token_decimals,
    )

    if settings.persist:
        from repositories.presale_repository import PresaleEventRecorder, load_sale_state

        saved = load_sale_state(settings.presale_id)
        if saved is not None:
            deployment.presale.restore(saved)
        deployment.presale.subscribe(PresaleEventRecorder(settings.presale_id))

    return PresaleRuntime(deployment=deployment, settings=settings)


@lru_cache(maxsize=1)
def get_runtime() -> PresaleRuntime:
    return build_runtime(load_settings())


def get_caller(x_caller_address: Optional[str] = Header(None)) -> Optional[str]:
    """Caller identity from the `X-Caller-Address` header (None if absent)."""
    return x_caller_address
