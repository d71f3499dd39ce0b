"""Shared CLI utilities for entry points."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import structlog

from src.return_attribution.config import DEFAULT_OUTPUT_DIR


def setup_logging(level: int = logging.INFO) -> None:
    """Configure structlog with console rendering."""
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def create_output_dir(prefix: str, base_dir: Path = DEFAULT_OUTPUT_DIR) -> Path:
    """Create a timestamped output directory under *base_dir*."""
    dt = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_dir = base_dir / f"{prefix}_{dt}"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir
