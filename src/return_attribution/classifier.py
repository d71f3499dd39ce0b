"""Per-day classification of daily returns into Held / Not Held periods."""

from __future__ import annotations

import numpy as np
import pandas as pd

from src.return_attribution.models import DailyClassification, Period


def classify_daily_returns(
    returns: pd.Series,
    periods: list[Period],
) -> list[DailyClassification]:
    """Tag every daily return with the kind of the period containing it.

    *periods* is the unfiltered, contiguous period list.  A day belongs to
    the period with start_date <= day < end_date; days outside every period
    are dropped.  Output is ascending by date.
    """
    spans = [p for p in periods if p.end_date > p.start_date]
    if not spans or returns.empty:
        return []

    starts = pd.DatetimeIndex([p.start_date for p in spans])
    ends = pd.DatetimeIndex([p.end_date for p in spans])
    ordered = returns.sort_index(kind="stable")
    dates = ordered.index

    # Last span starting on or before each day, then check the day is before its end
    pos = np.asarray(starts.searchsorted(dates, side="right")) - 1
    matched = pos >= 0
    matched[matched] = np.asarray(dates[matched] < ends[pos[matched]])

    return [
        DailyClassification(
            date=date,
            daily_return_pct=float(value),
            period_kind=spans[i].kind,
        )
        for date, value, i, ok in zip(dates, ordered.to_numpy(), pos, matched)
        if ok
    ]
