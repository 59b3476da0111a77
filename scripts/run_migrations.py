#!/usr/bin/env python3
"""Upgrade the voting schema to the latest alembic revision.

Run before the API starts; a failure aborts the deployment so the service
never runs against a schema missing the ledger constraints.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from agora.config import Settings
from agora.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main() -> int:
    """Apply pending migrations."""
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config(ALEMBIC_INI)
    head = ScriptDirectory.from_config(alembic_cfg).get_current_head()

    with logfire.span("migrate schema to {head}", head=head):
        try:
            command.upgrade(alembic_cfg, "head")
        except Exception as e:
            logfire.exception(
                "Database migration failed", head=head, error_type=type(e).__name__
            )
            raise

    logfire.info("Schema at {head}", head=head)
    return 0


if __name__ == "__main__":
    sys.exit(main())
