"""Logfire cloud observability initialization and instrumentation."""

import logging

import logfire
from fastapi import FastAPI

from presales_hub import __version__
from presales_hub.config import Settings

logger = logging.getLogger(__name__)

_initialized = False


def initialize_logfire(settings: Settings, app: FastAPI | None = None) -> None:
    """
    Initialize Logfire once per process.

    Instruments:
    - HTTPX clients (OpenAI and Gemini chat completions)
    - PyMongo (brief inserts, question aggregation)
    - FastAPI (when an app is given)
    - Python logging (bridged to Logfire)

    Observability is optional: a missing token or a failed setup only logs
    a warning.
    """
    global _initialized

    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return

    try:
        if not _initialized:
            logfire.configure(
                token=settings.logfire_token,
                service_name="presales-hub",
                service_version=__version__,
                environment=settings.environment,
            )
            logfire.instrument_httpx()
            logfire.instrument_pymongo()

            root_logger = logging.getLogger()
            root_logger.addHandler(logfire.LogfireLoggingHandler())
            _initialized = True
            logger.info("Logfire cloud tracking initialized")

        if app is not None:
            logfire.instrument_fastapi(app)

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
