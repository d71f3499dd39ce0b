"""Chart-ready series derived from daily classifications.

Only data preparation lives here; drawing is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from src.return_attribution.config import HELD
from src.return_attribution.models import DailyClassification


@dataclass(frozen=True)
class ShadingSegment:
    """A run of consecutive classified days of the same kind."""

    kind: str
    start_date: pd.Timestamp
    end_date: pd.Timestamp  # last day of the run, inclusive
    mean_daily_return_pct: float


def _kind_runs(classifications: list[DailyClassification]) -> pd.Series:
    """Run id per day: increments whenever the period kind changes."""
    kinds = pd.Series([c.period_kind for c in classifications])
    return (kinds != kinds.shift()).cumsum()


def compute_held_running_returns(classifications: list[DailyClassification]) -> pd.Series:
    """Running compounded return (percent) within each Held run.

    The running value restarts at every new Held run; Not Held days are NaN.
    Indexed by date, in the order of *classifications*.
    """
    if not classifications:
        return pd.Series(dtype=float, name="held_running_return")

    index = pd.DatetimeIndex([c.date for c in classifications], name="date")
    growth = pd.Series(
        1.0 + np.array([c.daily_return_pct for c in classifications]) / 100.0, index=index,
    )
    held = np.array([c.period_kind == HELD for c in classifications])
    runs = _kind_runs(classifications).to_numpy()

    running = growth.groupby(runs).cumprod().sub(1.0).mul(100.0)
    running[~held] = np.nan
    return running.rename("held_running_return")


def build_shading_segments(classifications: list[DailyClassification]) -> list[ShadingSegment]:
    """Group consecutive same-kind days into background shading bands."""
    if not classifications:
        return []

    frame = pd.DataFrame(
        {
            "date": [c.date for c in classifications],
            "ret": [c.daily_return_pct for c in classifications],
            "kind": [c.period_kind for c in classifications],
        }
    )
    frame["run"] = _kind_runs(classifications)

    segments: list[ShadingSegment] = []
    for _, run in frame.groupby("run", sort=True):
        segments.append(
            ShadingSegment(
                kind=run["kind"].iloc[0],
                start_date=run["date"].iloc[0],
                end_date=run["date"].iloc[-1],
                mean_daily_return_pct=float(run["ret"].mean()),
            )
        )
    return segments
