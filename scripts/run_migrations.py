#!/usr/bin/env python3
"""Upgrade the database schema.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``. Run from the repository root so
alembic.ini is found.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from persona.config import Settings
from persona.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)
    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                _exc_info=sys.exc_info(),
            )
            # The app container must not start against a half-migrated schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
