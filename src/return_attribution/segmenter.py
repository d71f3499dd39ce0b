"""Held / Not Held period segmentation.

Walks the date-sorted decisions as a two-state machine (position held or
not) and cuts the timeline where the position changes:

  1. Leading:  earliest return date -> first decision date, always Not Held.
  2. Loop:     last change -> decision date, in the state that was current
               before the decision.  ``buy`` opens, ``sell`` closes.  Other
               actions, and a buy while held or a sell while flat, change
               nothing and do not cut the timeline.
  3. Trailing: Held positions run until *as_of*; a Not Held tail runs until
               the last return date (capped at *as_of*).

``segment_periods`` returns the unfiltered view used to classify single
days.  ``build_period_stats`` derives the statistics view: zero-length
periods dropped, neighbours of the same kind merged, returns compounded,
labels numbered per kind.
"""

from __future__ import annotations

from dataclasses import replace

import pandas as pd
import structlog

from src.return_attribution.compounder import period_return
from src.return_attribution.config import (
    BUY_ACTION,
    HELD,
    NOT_HELD,
    PERIOD_LABELS,
    SELL_ACTION,
)
from src.return_attribution.models import Decision, Period

log = structlog.get_logger()


def _make_period(kind: str, start: pd.Timestamp, end: pd.Timestamp) -> Period:
    return Period(kind=kind, start_date=start, end_date=end, duration_days=(end - start).days)


def _next_state(action: str) -> bool | None:
    """New position state for *action*, or None when the action is unknown."""
    action = action.lower()
    if action == BUY_ACTION:
        return True
    if action == SELL_ACTION:
        return False
    return None


def segment_periods(
    decisions: list[Decision],
    returns: pd.Series,
    as_of: pd.Timestamp,
) -> list[Period]:
    """Build the unfiltered, chronological period list.

    Args:
        decisions: decisions sorted ascending by date (see normalize_decisions).
        returns: daily returns sorted ascending by date.
        as_of: calendar day that closes a still-open Held position.

    Returns:
        Contiguous periods; each one ends where the next one starts.
    """
    first_return = returns.index[0] if len(returns) else None
    last_return = returns.index[-1] if len(returns) else None

    if not decisions:
        if first_return is None:
            return []
        return [_make_period(NOT_HELD, first_return, min(last_return, as_of))]

    periods: list[Period] = []
    first_decision = decisions[0].date

    if first_return is not None and first_return < first_decision:
        periods.append(_make_period(NOT_HELD, first_return, first_decision))

    position_held = False
    last_change = first_decision

    for decision in decisions:
        new_state = _next_state(decision.action)
        if new_state is None:
            log.debug(
                "Ignoring unknown decision action",
                action=decision.action,
                date=decision.date.date().isoformat(),
            )
            continue
        if new_state == position_held:
            continue

        if decision.date > last_change:
            kind = HELD if position_held else NOT_HELD
            periods.append(_make_period(kind, last_change, decision.date))
        position_held = new_state
        last_change = decision.date

    if position_held:
        if as_of > last_change:
            periods.append(_make_period(HELD, last_change, as_of))
    elif last_return is not None:
        tail_end = min(last_return, as_of)
        if tail_end > last_change:
            periods.append(_make_period(NOT_HELD, last_change, tail_end))

    return periods


def _merge_same_kind(periods: list[Period]) -> list[Period]:
    """Join neighbouring periods of the same kind into one."""
    merged: list[Period] = []
    for p in periods:
        if merged and merged[-1].kind == p.kind and merged[-1].end_date == p.start_date:
            merged[-1] = _make_period(p.kind, merged[-1].start_date, p.end_date)
        else:
            merged.append(p)
    return merged


def build_period_stats(periods: list[Period], returns: pd.Series) -> list[Period]:
    """Filtered statistics view of *periods*.

    Drops periods with duration <= 0, merges neighbours of the same kind
    (left behind by same-day round trips), fills in the compounded return
    and numbers labels per kind in chronological order ("Held 1",
    "Not Held 1", "Held 2", ...).
    """
    kept = _merge_same_kind([p for p in periods if p.duration_days > 0])

    counters = {HELD: 0, NOT_HELD: 0}
    result: list[Period] = []
    for p in kept:
        counters[p.kind] += 1
        result.append(
            replace(
                p,
                cumulative_return_pct=period_return(p, returns),
                label=f"{PERIOD_LABELS[p.kind]} {counters[p.kind]}",
            )
        )
    return result
