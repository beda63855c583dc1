"""
API settings.

Loaded from environment variables (and `.env` at the project root, if
present). Defaults reproduce the reference sale: 0.50 of a 6-decimal
stablecoin per token, 1000-token cap on an 18-decimal sale token.

Variables:
- PRESALE_OWNER, PRESALE_ADDRESS
- SALE_TOKEN_ADDRESS, PAYMENT_TOKEN_ADDRESS
- PRESALE_PRICE_PER_TOKEN: payment smallest units per whole sale token
- PRESALE_CAP: sale-token smallest units
- SALE_TOKEN_DECIMALS, PAYMENT_TOKEN_DECIMALS
- PRESALE_PERSIST: "1"/"true" to record events and state in Supabase
- PRESALE_ID: key used for persistence
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.replace("_", ""))
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class PresaleSettings:
    owner: str = "0x1000000000000000000000000000000000000001"
    presale_address: str = "0x2000000000000000000000000000000000000002"
    sale_token_address: str = "0x3000000000000000000000000000000000000003"
    payment_token_address: str = "0x4000000000000000000000000000000000000004"
    price_per_token: int = 500_000
    cap: int = 1000 * 10**18
    sale_token_decimals: int = 18
    payment_token_decimals: int = 6
    persist: bool = False
    presale_id: str = "presale-main"


def load_settings() -> PresaleSettings:
    load_dotenv(dotenv_path=env_path)
    defaults = PresaleSettings()

    return PresaleSettings(
        owner=os.getenv("PRESALE_OWNER", defaults.owner),
        presale_address=os.getenv("PRESALE_ADDRESS", defaults.presale_address),
        sale_token_address=os.getenv("SALE_TOKEN_ADDRESS", defaults.sale_token_address),
        payment_token_address=os.getenv("PAYMENT_TOKEN_ADDRESS", defaults.payment_token_address),
        price_per_token=_env_int("PRESALE_PRICE_PER_TOKEN", defaults.price_per_token),
        cap=_env_int("PRESALE_CAP", defaults.cap),
        sale_token_decimals=_env_int("SALE_TOKEN_DECIMALS", defaults.sale_token_decimals),
        payment_token_decimals=_env_int("PAYMENT_TOKEN_DECIMALS", defaults.payment_token_decimals),
        persist=os.getenv("PRESALE_PERSIST", "").strip().lower() in _TRUE_VALUES,
        presale_id=os.getenv("PRESALE_ID", defaults.presale_id),
    )
