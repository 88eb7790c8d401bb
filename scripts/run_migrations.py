#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision``."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a broken schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
