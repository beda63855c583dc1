"""
Tests for `api/settings.py`.
"""

from __future__ import annotations

import pytest

from api.settings import PresaleSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "PRESALE_OWNER",
        "PRESALE_ADDRESS",
        "SALE_TOKEN_ADDRESS",
        "PAYMENT_TOKEN_ADDRESS",
        "PRESALE_PRICE_PER_TOKEN",
        "PRESALE_CAP",
        "SALE_TOKEN_DECIMALS",
        "PAYMENT_TOKEN_DECIMALS",
        "PRESALE_PERSIST",
        "PRESALE_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("api.settings.load_dotenv", lambda **kwargs: False)


def test_defaults_match_reference_sale() -> None:
    settings = load_settings()

    assert settings == PresaleSettings()
    assert settings.price_per_token == 500_000
    assert settings.cap == 1000 * 10**18
    assert settings.persist is False


def test_values_are_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("PRESALE_PRICE_PER_TOKEN", "250_000")
    monkeypatch.setenv("PRESALE_CAP", "5000000000000000000000")
    monkeypatch.setenv("PRESALE_OWNER", "0xabc")
    monkeypatch.setenv("PRESALE_PERSIST", "true")

    settings = load_settings()

    assert settings.price_per_token == 250_000
    assert settings.cap == 5000 * 10**18
    assert settings.owner == "0xabc"
    assert settings.persist is True


def test_non_integer_value_names_the_variable(monkeypatch) -> None:
    monkeypatch.setenv("PRESALE_CAP", "lots")

    with pytest.raises(RuntimeError, match="PRESALE_CAP"):
        load_settings()
