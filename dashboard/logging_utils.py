"""
Logging helpers for the dashboard server.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .log_readers import TailParse


logger = logging.getLogger("taskmgrr")


def configure_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.setLevel(numeric_level)


def log_skipped_lines(log_path: Path, result: TailParse, window: int) -> None:
    """Report lines dropped from the tail window without touching the response."""
    if result.skipped_malformed:
        logger.warning(
            "event=tail_skipped path=%s window=%d malformed=%d empty=%d kept=%d",
            log_path,
            window,
            result.skipped_malformed,
            result.skipped_empty,
            len(result.records),
        )
    elif result.skipped_empty:
        logger.debug(
            "event=tail_skipped path=%s window=%d empty=%d kept=%d",
            log_path,
            window,
            result.skipped_empty,
            len(result.records),
        )


__all__ = ["configure_logging", "log_skipped_lines"]
