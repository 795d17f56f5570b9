# File: portal/services/user_service.py

"""
User data access.

One function per route operation, each doing a single database round
trip. Nothing here raises: failures come back inside the Result as
UserNotFoundError, DuplicateEmailError or DatabaseOperationError.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from portal.core.exceptions import (
    DatabaseOperationError,
    DuplicateEmailError,
    UserNotFoundError,
)
from portal.core.result import Result
from portal.models.base import utcnow
from portal.models.user import User

logger = logging.getLogger(__name__)


def list_users(db: Session) -> Result[List[User]]:
    try:
        users = list(db.scalars(select(User).order_by(User.created_on, User.id)))
    except SQLAlchemyError as exc:
        logger.error("Error finding users: %s", exc)
        return Result.failure(DatabaseOperationError("list users", str(exc)))
    return Result.success(users)


def get_user(db: Session, user_id: str) -> Result[User]:
    try:
        user = db.get(User, user_id)
    except SQLAlchemyError as exc:
        logger.error("Error finding user %s: %s", user_id, exc)
        return Result.failure(DatabaseOperationError("get user", str(exc)))

    if user is None:
        logger.info("User with id '%s' does not exist", user_id)
        return Result.failure(UserNotFoundError(user_id))
    return Result.success(user)


def _is_duplicate_email(exc: IntegrityError) -> bool:
    """
    True only for the unique constraint on users.email.

    SQLite names the column, PostgreSQL and MySQL name the constraint.
    """
    message = str(exc.orig)
    return "uq_users_email" in message or "UNIQUE constraint failed: users.email" in message


def _write_failure(db: Session, operation: str, email: str, exc: SQLAlchemyError) -> Result:
    db.rollback()
    if isinstance(exc, IntegrityError) and _is_duplicate_email(exc):
        logger.warning("Error trying to %s '%s': %s", operation, email, exc.orig)
        return Result.failure(DuplicateEmailError(email))
    logger.error("Error trying to %s '%s': %s", operation, email, exc)
    return Result.failure(DatabaseOperationError(operation, str(exc)))


def create_user(db: Session, *, name: str, email: str) -> Result[User]:
    now = utcnow()
    user = User(name=name, email=email, created_on=now, modified_on=now, last_login=now)
    db.add(user)
    try:
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as exc:
        return _write_failure(db, "create user", email, exc)

    logger.info("User '%s' created", user.name)
    return Result.success(user)


def update_user(db: Session, user_id: str, *, name: str, email: str) -> Result[User]:
    found = get_user(db, user_id)
    if not found.ok:
        return found

    user = found.value
    user.name = name
    user.email = email
    user.modified_on = utcnow()
    try:
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as exc:
        return _write_failure(db, "update user", email, exc)

    logger.info("User '%s' updated", user.name)
    return Result.success(user)


def delete_user(db: Session, user_id: str) -> Result[str]:
    found = get_user(db, user_id)
    if not found.ok:
        return found

    db.delete(found.value)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error deleting user %s: %s", user_id, exc)
        return Result.failure(DatabaseOperationError("delete user", str(exc)))

    logger.info("User '%s' deleted", user_id)
    return Result.success(user_id)
