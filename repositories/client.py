"""
Supabase client initialization.

Exposes `get_supabase()`, which builds a single `supabase` client on first use
and returns the cached instance afterwards. Importing this module does not
require credentials, so the in-memory presale and its tests run without a
database.

Environment variables required (read from `.env` at the project root if
present):
- SUPABASE_URL: Your Supabase project URL
- SUPABASE_KEY: Your Supabase API key (use a server-side key only on the backend)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from supabase import Client, create_client  # type: ignore[import-not-found]

env_path = Path(__file__).parent.parent / ".env"

_client: Optional[Client] = None


def get_supabase() -> Client:
    """Return the shared Supabase client, creating it on first call."""

    global _client
    if _client is not None:
        return _client

    load_dotenv(dotenv_path=env_path)

    supabase_url: str | None = os.getenv("SUPABASE_URL")
    supabase_key: str | None = os.getenv("SUPABASE_KEY")

    if not supabase_url:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_URL. "
            "Set SUPABASE_URL to your Supabase project URL."
        )

    if not supabase_key:
        raise RuntimeError(
            "Missing environment variable: SUPABASE_KEY. "
            "Set SUPABASE_KEY to your Supabase API key."
        )

    _client = create_client(supabase_url, supabase_key)
    return _client


__all__ = ["get_supabase"]
