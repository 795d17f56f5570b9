"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from portal.db.session import Database
from portal.models.base import Base

from portal.models import project, user  # noqa: F401


def init_db(database: Database) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=database.engine)
