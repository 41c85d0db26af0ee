"""
Development entry point for the owner records database.

This module configures logging and creates the owner, pet and visit
tables on the configured database.

Modules:
- app.database: Database engine
- app.models: SQLAlchemy models
- app.logging: Logging setup
"""

import logging

from app.database import engine
from app import models
from app.logging import setup_logging

logger = logging.getLogger("app.main")


def init_db() -> None:
    """
    Create all tables for the owner records models.

    Intended for development only; schema management is handled elsewhere
    in deployed environments.
    """
    models.Base.metadata.create_all(bind=engine)
    logger.info("Created tables on %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    setup_logging()
    init_db()
