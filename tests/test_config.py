"""Tests for config and params."""

import pytest

from src.return_attribution.config import (
    ASSET_CLASSES,
    CRYPTO,
    PERIOD_LABELS,
    STOCKS,
    TICKER_FIELDS,
)
from src.return_attribution.params import AttributionParams


def test_params_defaults():
    params = AttributionParams()
    assert params.asset_class == STOCKS
    assert params.ticker is None
    assert params.as_of is None


def test_params_frozen():
    params = AttributionParams()
    with pytest.raises(AttributeError):
        params.ticker = "AAPL"  # type: ignore[misc]


def test_params_usable_as_cache_key():
    cache = {AttributionParams(ticker="AAPL", as_of="2024-01-01"): 1}
    assert cache[AttributionParams(ticker="AAPL", as_of="2024-01-01")] == 1


def test_constants():
    assert ASSET_CLASSES == (STOCKS, CRYPTO)
    assert TICKER_FIELDS[STOCKS] == "symbol"
    assert TICKER_FIELDS[CRYPTO] == "baseCurrency"
    assert set(PERIOD_LABELS.values()) == {"Held", "Not Held"}
