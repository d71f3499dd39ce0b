"""Summary counts and whole-series statistics."""

from __future__ import annotations

import pandas as pd

from src.return_attribution.compounder import compound_returns
from src.return_attribution.config import HELD, MIN_BUY_AND_HOLD_ROWS
from src.return_attribution.models import (
    AttributionSummary,
    DailyClassification,
    OverallStats,
    Period,
)


def summarize(
    periods: list[Period],
    classifications: list[DailyClassification],
) -> AttributionSummary:
    """Counts over the filtered periods and the classified days."""
    return AttributionSummary(
        total_days=len(classifications),
        held_days=sum(1 for c in classifications if c.period_kind == HELD),
        total_periods=len(periods),
        held_periods=sum(1 for p in periods if p.kind == HELD),
    )


def compute_overall_stats(periods: list[Period], returns: pd.Series) -> OverallStats:
    """Strategy-level returns (percent).

    held_cumulative_return_pct: Held period returns compounded together.
    buy_and_hold_return_pct: the whole series compounded; 0.0 when fewer
    than two observations exist.
    """
    held = [p.cumulative_return_pct for p in periods if p.kind == HELD]
    buy_and_hold = compound_returns(returns) if len(returns) >= MIN_BUY_AND_HOLD_ROWS else 0.0
    return OverallStats(
        held_cumulative_return_pct=compound_returns(held),
        buy_and_hold_return_pct=buy_and_hold,
    )
