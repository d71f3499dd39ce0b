"""Shared test fixtures for return attribution tests."""

import pandas as pd
import pytest


def _rows(start: str, end: str, pct: float | None, key_field: str, ticker: str) -> list[dict]:
    return [
        {"date": d.strftime("%Y-%m-%d"), key_field: ticker, "daily_return": pct}
        for d in pd.date_range(start, end, freq="D")
    ]


@pytest.fixture
def stock_rows():
    """Factory: daily stock rows (keyed by symbol) with a constant return."""

    def make(start: str, end: str, pct: float | None = 1.0, ticker: str = "AAPL") -> list[dict]:
        return _rows(start, end, pct, "symbol", ticker)

    return make


@pytest.fixture
def crypto_rows():
    """Factory: daily crypto rows (keyed by baseCurrency) with a constant return."""

    def make(start: str, end: str, pct: float | None = 1.0, ticker: str = "BTC") -> list[dict]:
        rows = _rows(start, end, pct, "baseCurrency", ticker)
        for r in rows:
            r["quoteCurrency"] = "USD"
        return rows

    return make


@pytest.fixture
def buy_sell_decisions() -> list[dict]:
    """Buy on Jan 10, sell on Jan 15 (AAPL, momentum strategy)."""
    return [
        {"ticker": "AAPL", "strategy": "momentum", "date": "2024-01-15", "action": "sell"},
        {"ticker": "AAPL", "strategy": "momentum", "date": "2024-01-10", "action": "buy"},
    ]


@pytest.fixture
def daily_returns() -> pd.Series:
    """Jan 1..Jan 20 2024 at +1% per day, as produced by the adapter."""
    index = pd.DatetimeIndex(pd.date_range("2024-01-01", "2024-01-20", freq="D"), name="date")
    return pd.Series(1.0, index=index, name="daily_return")
