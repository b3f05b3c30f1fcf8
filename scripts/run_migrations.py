#!/usr/bin/env python3
"""Upgrade the users and comments schema to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    configure_logfire(Settings())

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            # The API must not start on a half-migrated schema
            logfire.exception("Database migration failed", error_type=type(e).__name__)
            raise
    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
