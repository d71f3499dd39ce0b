"""Decision parsing, filtering and ordering.

Decisions arrive as loosely typed records (dicts from a REST payload or a
CSV/JSON file).  They are converted to ``Decision`` objects with a parsed
calendar date and sorted with a stable sort, so same-day decisions keep
their input order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd
import structlog

from src.return_attribution.config import DATE_FIELD
from src.return_attribution.models import Decision, InvalidInputError

log = structlog.get_logger()


def parse_date(value: object, what: str = "date") -> pd.Timestamp:
    """Parse *value* into a tz-naive calendar day.

    Strings must be ISO-8601; loose forms such as "01/10/2024" are
    rejected.  Timezone-aware values are converted to UTC before the time
    part is dropped.  Raises InvalidInputError for anything unparsable,
    including missing values.
    """
    if value is None:
        raise InvalidInputError(f"Missing {what}")
    try:
        ts = pd.to_datetime(value, format="ISO8601")
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Unparsable {what}: {value!r}") from exc
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        raise InvalidInputError(f"Missing {what}: {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts.normalize()


def _to_decision(record: Decision | Mapping) -> Decision:
    if isinstance(record, Decision):
        return Decision(
            ticker=record.ticker,
            strategy=record.strategy,
            date=parse_date(record.date, "decision date"),
            action=str(record.action or ""),
        )
    return Decision(
        ticker=str(record.get("ticker", "")),
        strategy=str(record.get("strategy", "")),
        date=parse_date(record.get(DATE_FIELD), "decision date"),
        action=str(record.get("action") or ""),
    )


def normalize_decisions(
    records: Iterable[Decision | Mapping],
    ticker: str | None = None,
    strategy: str | None = None,
) -> list[Decision]:
    """Parse, optionally filter, and sort decisions ascending by date.

    Args:
        records: decision dicts (``ticker``, ``strategy``, ``date``,
                 ``action``) or ``Decision`` objects.
        ticker: keep only this ticker when given.
        strategy: keep only this strategy when given.

    Returns:
        Decisions sorted by date; ties keep their original relative order.
    """
    decisions = [_to_decision(r) for r in records]
    if ticker is not None:
        decisions = [d for d in decisions if d.ticker == ticker]
    if strategy is not None:
        decisions = [d for d in decisions if d.strategy == strategy]

    # sorted() is stable
    ordered = sorted(decisions, key=lambda d: d.date)
    log.debug(
        "Decisions normalized", n_decisions=len(ordered), ticker=ticker, strategy=strategy,
    )
    return ordered


def group_by_strategy(decisions: Iterable[Decision]) -> dict[str, list[Decision]]:
    """Split decisions into per-strategy lists, keeping first-seen order."""
    grouped: dict[str, list[Decision]] = {}
    for d in decisions:
        grouped.setdefault(d.strategy, []).append(d)
    return grouped
