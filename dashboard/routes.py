"""
FastAPI routes for the taskmgrr dashboard.

/api/data returns the decoded tail of the producer's NDJSON log:
- missing log file -> 200 with a "no data yet" object
- unreadable log file (or unreachable directory) -> 500 with []
- parse-phase failure -> 200 with []
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter

from .log_readers import parse_tail, read_tail
from .logging_utils import log_skipped_lines
from .schemas import HealthResponse, NoDataResponse
from .settings import Settings


logger = logging.getLogger("taskmgrr")


def build_router(settings: Settings, limiter: Limiter) -> APIRouter:
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse()

    @router.get("/api/data")
    @limiter.limit(settings.data_rate_limit)
    def get_data(request: Request):
        log_path = settings.log_path
        window = settings.tail_window

        try:
            log_path.stat()
            text = read_tail(log_path, window)
        except (FileNotFoundError, NotADirectoryError):
            logger.warning("Log file not found at %s. Waiting for producer...", log_path)
            return NoDataResponse()
        except OSError as exc:
            logger.error("Error reading log file %s: %s", log_path, exc)
            return JSONResponse(status_code=500, content=[])

        try:
            result = parse_tail(text, window)
        except Exception:
            logger.exception("Error parsing log tail from %s", log_path)
            return JSONResponse(status_code=200, content=[])

        log_skipped_lines(log_path, result, window)
        return JSONResponse(status_code=200, content=result.records)

    return router


__all__ = ["build_router"]
