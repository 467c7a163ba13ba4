"""
FastAPI application entrypoint for the taskmgrr dashboard.

Run with:
    uvicorn dashboard.app:app --port 3000
or:
    taskmgrr-dashboard --port 3000
"""

from __future__ import annotations

import argparse
from contextlib import asynccontextmanager
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from .logging_utils import configure_logging
from .routes import build_router
from .settings import Settings


logger = logging.getLogger("taskmgrr")


async def rate_limit_handler(_, __):
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded. Please try again later."},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Task Manager dashboard running")
        logger.info("Dashboard: http://%s:%d", settings.host, settings.port)
        logger.info("Tracking log: %s", settings.log_path)
        yield

    # One limiter per app so route limits are not shared between instances.
    limiter = Limiter(key_func=get_remote_address)

    app = FastAPI(lifespan=lifespan)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.include_router(build_router(settings, limiter))

    # Mounted last so API routes take precedence over static paths.
    if settings.static_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=str(settings.static_dir), html=True),
            name="static",
        )
    else:
        logger.warning(
            "Static directory %s not found; serving API routes only.",
            settings.static_dir,
        )
    return app


app = create_app()


def main(argv: Optional[list[str]] = None) -> None:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Serve the taskmgrr dashboard.")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    args = parser.parse_args(argv)

    settings = Settings(**{**settings.model_dump(), "host": args.host, "port": args.port})
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


__all__ = ["app", "create_app", "main"]


if __name__ == "__main__":
    main()
