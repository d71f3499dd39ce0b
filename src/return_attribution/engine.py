"""Return attribution pipeline for one ticker.

  decisions ─► normalize ─┐
                          ├─► segment_periods ─► build_period_stats ─► summarize
  return rows ─► adapter ─┘          └─────────► classify_daily_returns ┘

Every call is a pure function of its inputs.  The only implicit input,
"today", is resolved once up front (resolve_as_of) and can be injected for
deterministic runs.  Nothing is cached here; callers that want caching can
key it on AttributionParams plus their data.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd
import structlog

from src.return_attribution.aggregator import compute_overall_stats, summarize
from src.return_attribution.classifier import classify_daily_returns
from src.return_attribution.decisions import group_by_strategy, normalize_decisions, parse_date
from src.return_attribution.models import AttributionResult, Decision
from src.return_attribution.params import AttributionParams
from src.return_attribution.returns import ReturnRows, get_adapter
from src.return_attribution.segmenter import build_period_stats, segment_periods

log = structlog.get_logger()


def resolve_as_of(as_of: object | None = None) -> pd.Timestamp:
    """Calendar day used to close an open trailing position (default: today)."""
    if as_of is None:
        return pd.Timestamp.now().normalize()
    return parse_date(as_of, "as_of")


def run_attribution(
    decisions: Iterable[Decision | Mapping],
    return_rows: ReturnRows,
    asset_class: str,
    ticker: str | None = None,
    strategy: str | None = None,
    as_of: object | None = None,
) -> AttributionResult:
    """Attribute a ticker's daily returns to Held / Not Held periods.

    Args:
        decisions: decision records for the ticker (any order).
        return_rows: raw stock or crypto return rows; other tickers ignored.
        asset_class: ``stocks`` or ``crypto``, picks the ticker field.
        ticker: ticker to analyse.  Defaults to the earliest decision's ticker.
        strategy: restrict decisions to one strategy when given.
        as_of: ISO-8601 date/time closing an open position; today when None.

    Returns:
        AttributionResult with the filtered periods, the per-day
        classification, summary counts and overall stats.

    Raises:
        InvalidInputError: a decision or kept return row has a bad date.
    """
    adapter = get_adapter(asset_class)
    as_of_day = resolve_as_of(as_of)

    ordered = normalize_decisions(decisions, ticker=ticker, strategy=strategy)
    if ticker is None:
        if not ordered:
            raise ValueError("Cannot infer ticker from an empty decision list")
        ticker = ordered[0].ticker
        ordered = [d for d in ordered if d.ticker == ticker]

    returns = adapter.select(return_rows, ticker)

    raw_periods = segment_periods(ordered, returns, as_of_day)
    periods = build_period_stats(raw_periods, returns)
    classifications = classify_daily_returns(returns, raw_periods)
    summary = summarize(periods, classifications)
    stats = compute_overall_stats(periods, returns)

    log.info(
        "Attribution complete",
        ticker=ticker,
        strategy=strategy,
        asset_class=asset_class,
        as_of=as_of_day.date().isoformat(),
        n_decisions=len(ordered),
        n_returns=len(returns),
        periods=summary.total_periods,
        held_periods=summary.held_periods,
    )
    return AttributionResult(
        ticker=ticker,
        strategy=strategy,
        asset_class=asset_class,
        as_of=as_of_day,
        periods=periods,
        daily_classifications=classifications,
        summary=summary,
        stats=stats,
    )


def run_strategy_attributions(
    decisions: Iterable[Decision | Mapping],
    return_rows: ReturnRows,
    asset_class: str,
    ticker: str | None = None,
    as_of: object | None = None,
) -> dict[str, AttributionResult]:
    """Run one attribution per strategy found in *decisions*.

    Return rows are materialized once so an iterator can be shared by
    every strategy.
    """
    ordered = normalize_decisions(decisions, ticker=ticker)
    rows = return_rows if isinstance(return_rows, pd.DataFrame) else pd.DataFrame(list(return_rows))
    as_of_day = resolve_as_of(as_of)

    results: dict[str, AttributionResult] = {}
    for strategy_name, strategy_decisions in group_by_strategy(ordered).items():
        results[strategy_name] = run_attribution(
            strategy_decisions,
            rows,
            asset_class,
            ticker=ticker,
            strategy=strategy_name,
            as_of=as_of_day,
        )
    return results


def run_with_params(
    params: AttributionParams,
    decisions: Iterable[Decision | Mapping],
    return_rows: ReturnRows,
) -> AttributionResult:
    """run_attribution driven by an AttributionParams bundle."""
    return run_attribution(
        decisions,
        return_rows,
        params.asset_class,
        ticker=params.ticker,
        strategy=params.strategy,
        as_of=params.as_of,
    )
