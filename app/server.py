# =============================================================================
# app/server.py - HTTP Server Bootstrap
# =============================================================================
# Runs the FastAPI app under uvicorn on the configured host and port.
# =============================================================================

import logging

import uvicorn

from app.config import Settings, settings
from app.main import create_app

logger = logging.getLogger(__name__)


def serve(app_settings: Settings = settings) -> None:
    """
    Bind to the configured port and serve requests until stopped.

    Args:
        app_settings: Settings providing HOST, PORT and DEBUG
    """
    config = uvicorn.Config(
        create_app(app_settings),
        host=app_settings.HOST,
        port=app_settings.PORT,
        log_level="debug" if app_settings.DEBUG else "info",
    )
    logger.info(f"Binding Calculator API to {app_settings.HOST}:{app_settings.PORT}")
    uvicorn.Server(config).run()
