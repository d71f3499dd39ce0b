"""Per-run parameter container for the attribution engine."""

from dataclasses import dataclass

from src.return_attribution.config import STOCKS


@dataclass(frozen=True)
class AttributionParams:
    """Immutable inputs that, together with the data, fully determine a run.

    frozen=True makes it hashable, so callers can use it as part of a
    memoization key.  ``as_of`` is an ISO-8601 string (or None for today).
    """

    asset_class: str = STOCKS
    ticker: str | None = None
    strategy: str | None = None
    as_of: str | None = None
