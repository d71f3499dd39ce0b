"""Record loading from CSV / JSON files via pandas.

Fetching from the dashboard API is the caller's job; this module only reads
exported files so the CLI can run the engine offline.
"""

from pathlib import Path

import pandas as pd
import structlog

log = structlog.get_logger(__name__)


def load_records(path: Path) -> list[dict]:
    """Read a CSV or JSON (array of objects) file into a list of dicts.

    Missing values become None so that downstream null checks see them.
    Dates are left as strings; parsing happens in the engine.
    """
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype={"date": str})
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", convert_dates=False)
    else:
        raise ValueError(f"Unsupported file type {suffix!r} for {path} (use .csv or .json)")

    df = df.astype(object).where(df.notna(), None)
    log.info("Records loaded", path=str(path), rows=len(df))
    return df.to_dict(orient="records")
