"""Apply Alembic migrations up to the latest revision."""
from __future__ import annotations

import logging
import os

from alembic import command
from alembic.config import Config

from hashvote.core.logging import configure_logging
from hashvote.core.settings import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")
)


def build_config(url: str | None = None) -> Config:
    """Return an Alembic config pointing at the project's migrations folder."""
    cfg = Config(os.path.join(MIGRATIONS_DIR, "alembic.ini"))
    cfg.set_main_option("script_location", MIGRATIONS_DIR)
    # ConfigParser interpolation treats "%" specially.
    cfg.set_main_option("sqlalchemy.url", (url or settings.sqlalchemy_database_url).replace("%", "%%"))
    return cfg


def run_upgrade_head(url: str | None = None) -> None:
    """Upgrade the configured database to the head revision."""
    logger.info("Upgrading database schema to head")
    command.upgrade(build_config(url), "head")


if __name__ == "__main__":
    configure_logging()
    run_upgrade_head()
