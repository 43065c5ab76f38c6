"""Schema helpers: create missing tables or drop and recreate them."""
from __future__ import annotations

import logging

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all() -> None:
    """Create missing tables; existing rows are left alone."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def reset_all() -> None:
    """Drop and recreate every table. Destroys all stored cars."""
    engine = get_engine()
    logger.warning("Dropping and recreating tables on %s", engine.url)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
