"""Data models for attribution inputs and results."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from src.return_attribution.config import HELD


class InvalidInputError(ValueError):
    """Raised when a decision or return row carries an unparsable date."""


@dataclass(frozen=True)
class Decision:
    """One buy/sell signal for a ticker+strategy on a calendar day."""

    ticker: str
    strategy: str
    date: pd.Timestamp  # normalized to midnight, tz-naive
    action: str  # "buy" | "sell" | anything else (no-op)


@dataclass(frozen=True)
class Period:
    """A contiguous Held / Not Held span, membership is [start_date, end_date)."""

    kind: str  # "held" | "not_held"
    start_date: pd.Timestamp
    end_date: pd.Timestamp
    duration_days: int
    cumulative_return_pct: float = 0.0
    label: str = ""

    @property
    def is_held(self) -> bool:
        return self.kind == HELD


@dataclass(frozen=True)
class DailyClassification:
    """A single daily return tagged with the kind of period it falls in."""

    date: pd.Timestamp
    daily_return_pct: float
    period_kind: str


@dataclass(frozen=True)
class AttributionSummary:
    total_days: int
    held_days: int
    total_periods: int
    held_periods: int


@dataclass(frozen=True)
class OverallStats:
    held_cumulative_return_pct: float
    buy_and_hold_return_pct: float


@dataclass
class AttributionResult:
    """Complete output of one attribution run (one ticker + strategy)."""

    ticker: str
    strategy: str | None
    asset_class: str
    as_of: pd.Timestamp
    periods: list[Period] = field(default_factory=list)  # filtered view
    daily_classifications: list[DailyClassification] = field(default_factory=list)
    summary: AttributionSummary = field(
        default_factory=lambda: AttributionSummary(0, 0, 0, 0)
    )
    stats: OverallStats = field(default_factory=lambda: OverallStats(0.0, 0.0))
