"""
FastAPI application exposing the confined file browser.
"""

import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from file_browser.api.routers import router as api_router
from file_browser.config.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)


def create_app(static_dir: str | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        static_dir: Directory with a built browser UI served at "/" (skipped if missing)

    Returns:
        FastAPI application
    """
    app = FastAPI(title="File Browser API")
    app.include_router(api_router)

    static_dir = static_dir if static_dir is not None else settings.static_dir
    if static_dir and os.path.isdir(static_dir):
        # Mounted last so /api routes take precedence
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="ui")
        logger.info(f"Serving UI from {os.path.abspath(static_dir)}")

    return app


app = create_app()
