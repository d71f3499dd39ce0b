"""Text tables and JSON export for attribution results."""

import json
import math
from pathlib import Path

from src.return_attribution.chart_data import build_shading_segments, compute_held_running_returns
from src.return_attribution.models import AttributionResult, Period


def _day(ts) -> str:
    return ts.strftime("%Y-%m-%d")


def chart_to_dict(result: AttributionResult) -> dict:
    """Chart series for a renderer: held running return and shading bands."""
    running = compute_held_running_returns(result.daily_classifications)
    return {
        "held_running_return_pct": [
            {"date": _day(d), "value": None if math.isnan(v) else float(v)}
            for d, v in running.items()
        ],
        "shading_segments": [
            {
                "kind": s.kind,
                "start_date": _day(s.start_date),
                "end_date": _day(s.end_date),
                "mean_daily_return_pct": s.mean_daily_return_pct,
            }
            for s in build_shading_segments(result.daily_classifications)
        ],
    }


def result_to_dict(result: AttributionResult) -> dict:
    """JSON-safe, deterministic representation of *result*."""
    return {
        "ticker": result.ticker,
        "strategy": result.strategy,
        "asset_class": result.asset_class,
        "as_of": _day(result.as_of),
        "periods": [
            {
                "kind": p.kind,
                "label": p.label,
                "start_date": _day(p.start_date),
                "end_date": _day(p.end_date),
                "duration_days": p.duration_days,
                "cumulative_return_pct": p.cumulative_return_pct,
            }
            for p in result.periods
        ],
        "daily_classifications": [
            {
                "date": _day(c.date),
                "daily_return_pct": c.daily_return_pct,
                "period_kind": c.period_kind,
            }
            for c in result.daily_classifications
        ],
        "summary": {
            "total_days": result.summary.total_days,
            "held_days": result.summary.held_days,
            "total_periods": result.summary.total_periods,
            "held_periods": result.summary.held_periods,
        },
        "stats": {
            "held_cumulative_return_pct": result.stats.held_cumulative_return_pct,
            "buy_and_hold_return_pct": result.stats.buy_and_hold_return_pct,
        },
        "chart": chart_to_dict(result),
    }


def format_period_table(periods: list[Period]) -> str:
    """Format the filtered periods as a readable CLI table."""
    lines = [
        f"{'Period':<14}{'Start':<12}{'End':<12}{'Days':>6}{'Return':>10}",
        "-" * 54,
    ]
    for p in periods:
        lines.append(
            f"{p.label:<14}{_day(p.start_date):<12}{_day(p.end_date):<12}"
            f"{p.duration_days:>6d}{p.cumulative_return_pct:>9.2f}%"
        )
    if not periods:
        lines.append("  (no periods)")
    return "\n".join(lines)


def format_summary_table(result: AttributionResult) -> str:
    """Summary counts and overall returns for one result."""
    s = result.summary
    st = result.stats
    title = f"{result.ticker} / {result.strategy}" if result.strategy else result.ticker
    lines = [
        f"Attribution Summary: {title}",
        "-" * 40,
        f"  Total Days:       {s.total_days:>8d}",
        f"  Held Days:        {s.held_days:>8d}",
        f"  Total Periods:    {s.total_periods:>8d}",
        f"  Held Periods:     {s.held_periods:>8d}",
        f"  Held Return:      {st.held_cumulative_return_pct:>7.2f}%",
        f"  Buy & Hold:       {st.buy_and_hold_return_pct:>7.2f}%",
    ]
    return "\n".join(lines)


def save_result_json(results: dict[str, AttributionResult], output_dir: Path) -> Path:
    """Save {strategy: result} as attribution.json. Returns path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / "attribution.json"
    payload = {name: result_to_dict(r) for name, r in results.items()}
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)
    print(f"Attribution JSON saved to {path}")
    return path
