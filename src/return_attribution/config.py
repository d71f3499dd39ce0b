"""Typed configuration for return attribution.

All values are plain constants; per-run inputs live in AttributionParams.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# Asset classes and raw row field names
# ---------------------------------------------------------------------------
STOCKS: str = "stocks"
CRYPTO: str = "crypto"
ASSET_CLASSES: tuple[str, ...] = (STOCKS, CRYPTO)

# Field that identifies the ticker in a return row, per asset class
TICKER_FIELDS: dict[str, str] = {
    STOCKS: "symbol",
    CRYPTO: "baseCurrency",
}
DATE_FIELD: str = "date"
RETURN_FIELD: str = "daily_return"  # percent, nullable

# ---------------------------------------------------------------------------
# Decisions and periods
# ---------------------------------------------------------------------------
BUY_ACTION: str = "buy"
SELL_ACTION: str = "sell"

HELD: str = "held"
NOT_HELD: str = "not_held"
PERIOD_LABELS: dict[str, str] = {
    HELD: "Held",
    NOT_HELD: "Not Held",
}

# Buy & hold needs at least this many observations to be reported
MIN_BUY_AND_HOLD_ROWS: int = 2

# Paths
DEFAULT_OUTPUT_DIR: Path = Path("output")
