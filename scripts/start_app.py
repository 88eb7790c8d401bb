#!/usr/bin/env python3
"""Run the API under uvicorn."""

import logfire
import uvicorn

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main() -> None:
    settings = Settings()

    # Before the app module is imported, so startup errors are captured
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Agora API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "agora.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Agora API failed to start")
        raise


if __name__ == "__main__":
    main()
