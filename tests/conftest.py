"""Shared pytest configuration."""

import pytest

from quotes.config.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and .env file."""
    for name in (
        "QUOTES_DEFAULT_TAX_RATE",
        "QUOTES_CURRENCY_SYMBOL",
        "QUOTES_TOTALS_TOLERANCE",
        "QUOTES_LOG_LEVEL",
        "QUOTES_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
