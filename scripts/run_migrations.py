#!/usr/bin/env python3
"""Apply the engagement schema migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from devconnect.config import Settings
from devconnect.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the schema and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    try:
        with logfire.span("Engagement schema migration", target=target):
            alembic_cfg = Config("alembic.ini")
            alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
            command.upgrade(alembic_cfg, target)

        logfire.info("Engagement schema is up to date", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Engagement schema migration failed",
            error=str(e),
            error_type=type(e).__name__,
            target=target,
            _exc_info=sys.exc_info(),
        )
        # The container must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
