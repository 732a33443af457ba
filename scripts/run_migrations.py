#!/usr/bin/env python3
"""Upgrade the Loop schema with Logfire error tracking.

Usage: run_migrations.py [revision]   (defaults to "head")
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from loop.config import Settings
from loop.util.logging import setup_logging
from loop.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Upgrade to the requested revision and log any errors to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = sys.argv[1] if len(sys.argv) > 1 else "head"

    try:
        logfire.info(
            "Starting database migrations",
            revision=revision,
            environment=settings.environment,
        )

        # Works from any working directory, migrations/env.py reads the URL from Settings
        alembic_cfg = Config(str(ALEMBIC_INI))
        command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
