"""Daily return series adapters for stocks and crypto rows.

Stock rows identify their ticker by ``symbol``, crypto rows by
``baseCurrency``.  Everything downstream only sees a float Series of daily
returns (percent) indexed by calendar day, so that asymmetry stops here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np
import pandas as pd

from src.return_attribution.config import (
    CRYPTO,
    DATE_FIELD,
    RETURN_FIELD,
    STOCKS,
    TICKER_FIELDS,
)
from src.return_attribution.models import InvalidInputError

ReturnRows = pd.DataFrame | Iterable[Mapping]


def empty_return_series() -> pd.Series:
    return pd.Series(
        [], index=pd.DatetimeIndex([], name=DATE_FIELD), name=RETURN_FIELD, dtype=float,
    )


@dataclass(frozen=True)
class ReturnSeriesAdapter:
    """Selects one ticker's daily returns from asset-class specific rows."""

    asset_class: str
    ticker_field: str

    def select(self, rows: ReturnRows, ticker: str) -> pd.Series:
        """Return *ticker*'s daily returns sorted ascending by date.

        Rows with a null, non-numeric or non-finite return are dropped,
        never zero-filled.  Raises InvalidInputError when any of the
        ticker's rows has a missing or non-ISO date, whatever its return.
        """
        frame = rows if isinstance(rows, pd.DataFrame) else pd.DataFrame(list(rows))
        if frame.empty or self.ticker_field not in frame.columns:
            return empty_return_series()

        frame = frame.loc[frame[self.ticker_field] == ticker]
        if frame.empty:
            return empty_return_series()
        if DATE_FIELD not in frame.columns:
            raise InvalidInputError(f"Return rows for {ticker!r} have no {DATE_FIELD!r} field")

        # Aware timestamps go to UTC; naive ones are taken as already UTC
        try:
            dates = pd.to_datetime(frame[DATE_FIELD], format="ISO8601", utc=True)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Unparsable return date for {ticker!r}: {exc}") from exc
        if dates.isna().any():
            bad = frame.loc[dates.isna().to_numpy(), DATE_FIELD].iloc[0]
            raise InvalidInputError(f"Missing return date for {ticker!r}: {bad!r}")
        dates = dates.dt.tz_localize(None).dt.normalize()

        if RETURN_FIELD not in frame.columns:
            return empty_return_series()
        values = pd.to_numeric(frame[RETURN_FIELD], errors="coerce").to_numpy(dtype=float)
        keep = np.isfinite(values)
        if not keep.any():
            return empty_return_series()

        series = pd.Series(
            values[keep],
            index=pd.DatetimeIndex(dates.to_numpy()[keep], name=DATE_FIELD),
            name=RETURN_FIELD,
        )
        return series.sort_index(kind="stable")


_ADAPTERS: dict[str, ReturnSeriesAdapter] = {
    STOCKS: ReturnSeriesAdapter(STOCKS, TICKER_FIELDS[STOCKS]),
    CRYPTO: ReturnSeriesAdapter(CRYPTO, TICKER_FIELDS[CRYPTO]),
}


def get_adapter(asset_class: str) -> ReturnSeriesAdapter:
    """Look up the adapter for *asset_class* (``stocks`` or ``crypto``)."""
    try:
        return _ADAPTERS[asset_class]
    except KeyError:
        raise ValueError(
            f"Unknown asset class {asset_class!r}, expected one of {sorted(_ADAPTERS)}"
        ) from None


def load_daily_returns(asset_class: str, rows: ReturnRows, ticker: str) -> pd.Series:
    """Convenience wrapper: ``get_adapter(asset_class).select(rows, ticker)``."""
    return get_adapter(asset_class).select(rows, ticker)
