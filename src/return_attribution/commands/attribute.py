"""Held / Not Held return attribution from exported decision and return files."""

import sys
from pathlib import Path

from src.return_attribution.cli_utils import create_output_dir, setup_logging
from src.return_attribution.config import ASSET_CLASSES, DEFAULT_OUTPUT_DIR, STOCKS
from src.return_attribution.data import load_records
from src.return_attribution.engine import run_attribution, run_strategy_attributions
from src.return_attribution.reporting import (
    format_period_table,
    format_summary_table,
    save_result_json,
)

COMMAND_NAME = "attribute"


def register(subparsers) -> None:
    p = subparsers.add_parser(
        COMMAND_NAME, help="Attribute daily returns to Held / Not Held periods",
    )
    p.add_argument(
        "--decisions", type=Path, required=True,
        help="Decision records (.csv or .json): ticker, strategy, date, action",
    )
    p.add_argument(
        "--returns", type=Path, required=True,
        help="Daily return rows (.csv or .json) with date and daily_return",
    )
    p.add_argument(
        "--asset-class", choices=ASSET_CLASSES, default=STOCKS,
        help="stocks (rows keyed by symbol) or crypto (rows keyed by baseCurrency)",
    )
    p.add_argument(
        "--ticker", default=None,
        help="Ticker to analyse (default: ticker of the earliest decision)",
    )
    p.add_argument(
        "--strategy", default=None,
        help="Only analyse this strategy (default: every strategy in the file)",
    )
    p.add_argument(
        "--as-of", default=None,
        help="ISO date closing a still-open position (default: today)",
    )
    p.add_argument(
        "--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR,
        help="Base directory for the timestamped report folder (default: output)",
    )


def run(args) -> int:
    setup_logging()

    decisions = load_records(args.decisions)
    return_rows = load_records(args.returns)
    print(f"Loaded {len(decisions)} decisions and {len(return_rows)} return rows")

    try:
        if args.strategy:
            result = run_attribution(
                decisions, return_rows, args.asset_class,
                ticker=args.ticker, strategy=args.strategy, as_of=args.as_of,
            )
            results = {args.strategy: result}
        else:
            results = run_strategy_attributions(
                decisions, return_rows, args.asset_class,
                ticker=args.ticker, as_of=args.as_of,
            )
    except ValueError as exc:  # includes InvalidInputError
        print(f"\nERROR: {exc}", file=sys.stderr)
        return 1

    if not results:
        print("\nNo decisions matched; nothing to attribute.")
        return 0

    for result in results.values():
        print()
        print(format_summary_table(result))
        print()
        print(format_period_table(result.periods))

    output_dir = create_output_dir("attribution", base_dir=args.output_dir)
    save_result_json(results, output_dir)
    return 0
