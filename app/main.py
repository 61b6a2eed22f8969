from __future__ import annotations

import logging
import os

from fastapi import FastAPI


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    from app.config import load_env_files

    load_env_files()
    _configure_logging()

    application = FastAPI(
        title="Data Source Ingestion API",
        version="1.0.0",
    )

    from app.api.routers import data_sources_router

    application.include_router(data_sources_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    logging.getLogger(__name__).info("Application created with %d routes", len(application.routes))
    return application


app = create_app()
