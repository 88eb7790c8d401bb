"""Standard-library logging setup.

Application code logs through Logfire directly. Libraries such as uvicorn,
alembic and SQLAlchemy use ``logging``; their records are forwarded to
Logfire so everything ends up in one place.
"""

import logging

import logfire

from agora.config import Settings

# Libraries that are too chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Root log level for the given settings."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route standard-library log records to Logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by earlier imports
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
