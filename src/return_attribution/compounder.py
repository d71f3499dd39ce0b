"""Compounded returns over a period.

Daily percentages are compounded, not summed: the log returns
ln(1 + r/100) are added and the total is exponentiated back, which equals
prod(1 + r/100) - 1 without a long chain of float multiplications.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from src.return_attribution.models import Period


def compound_returns(returns_pct: pd.Series | np.ndarray | list[float]) -> float:
    """Compound daily percentage returns into one percentage.

    Returns 0.0 for an empty input (indistinguishable from a flat period).
    """
    values = np.asarray(returns_pct, dtype=float)
    if values.size == 0:
        return 0.0
    # A -100% day sends log1p to -inf and the result to exactly -100%
    with np.errstate(divide="ignore"):
        total_log = np.log1p(values / 100.0).sum()
    return float(np.expm1(total_log) * 100.0)


def select_period_returns(
    returns: pd.Series,
    start_date: pd.Timestamp,
    end_date: pd.Timestamp,
) -> pd.Series:
    """Daily returns with start_date <= date < end_date, ascending by date."""
    mask = (returns.index >= start_date) & (returns.index < end_date)
    return returns.loc[mask].sort_index(kind="stable")


def period_return(period: Period, returns: pd.Series) -> float:
    """Compounded return (percent) of the days that belong to *period*."""
    return compound_returns(select_period_returns(returns, period.start_date, period.end_date))
