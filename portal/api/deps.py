# File: portal/api/deps.py

from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from portal.db.session import Database


def get_database(request: Request) -> Database:
    """The handle created by create_application() and stored on app.state."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    yield from get_database(request).get_session()
