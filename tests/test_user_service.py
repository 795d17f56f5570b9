# File: tests/test_user_service.py

"""
Data-access tests: every call returns a Result instead of raising.
"""

from datetime import datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from portal.core.exceptions import (
    DatabaseOperationError,
    DuplicateEmailError,
    UserNotFoundError,
)
from portal.models.user import User
from portal.services import user_service


def test_create_sets_timestamps(session):
    result = user_service.create_user(session, name="Ann", email="ann@x.com")
    assert result.ok
    user = result.value
    assert user.id
    assert user.created_on is not None
    assert user.modified_on is not None
    assert user.last_login is not None


def test_duplicate_email_keeps_single_row(session):
    assert user_service.create_user(session, name="Ann", email="ann@x.com").ok

    result = user_service.create_user(session, name="Ann 2", email="ann@x.com")
    assert not result.ok
    assert isinstance(result.error, DuplicateEmailError)

    rows = session.scalars(select(User).where(User.email == "ann@x.com")).all()
    assert len(rows) == 1
    assert rows[0].name == "Ann"


def test_get_unknown_user(session):
    result = user_service.get_user(session, "nope")
    assert isinstance(result.error, UserNotFoundError)
    with pytest.raises(UserNotFoundError):
        result.unwrap()


def test_update_advances_modified_on(session):
    created = user_service.create_user(session, name="Ann", email="ann@x.com").unwrap()
    user_id = created.id
    previous = created.modified_on

    updated = user_service.update_user(session, user_id, name="Anne", email="anne@x.com").unwrap()
    assert updated.name == "Anne"
    assert updated.email == "anne@x.com"
    assert updated.modified_on >= previous

    fetched = user_service.get_user(session, user_id).unwrap()
    assert fetched.name == "Anne"


def test_update_unknown_user(session):
    result = user_service.update_user(session, "nope", name="X", email="x@x.com")
    assert isinstance(result.error, UserNotFoundError)


def test_delete_then_fetch(session):
    user_id = user_service.create_user(session, name="Ann", email="ann@x.com").unwrap().id

    assert user_service.delete_user(session, user_id).unwrap() == user_id
    assert isinstance(user_service.get_user(session, user_id).error, UserNotFoundError)


def test_delete_unknown_user(session):
    assert isinstance(user_service.delete_user(session, "nope").error, UserNotFoundError)


def test_list_users_returns_every_user(session):
    user_service.create_user(session, name="Ann", email="ann@x.com")
    user_service.create_user(session, name="Bob", email="bob@x.com")

    users = user_service.list_users(session).unwrap()
    assert sorted(u.name for u in users) == ["Ann", "Bob"]


def test_list_users_oldest_first(session):
    session.add_all([
        User(name="Bob", email="bob@x.com", created_on=datetime(2024, 1, 2)),
        User(name="Ann", email="ann@x.com", created_on=datetime(2024, 1, 1)),
    ])
    session.commit()

    users = user_service.list_users(session).unwrap()
    assert [u.name for u in users] == ["Ann", "Bob"]


def test_query_failure_becomes_database_error(session, monkeypatch):
    def boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("server went away"))

    monkeypatch.setattr(session, "scalars", boom)

    result = user_service.list_users(session)
    assert isinstance(result.error, DatabaseOperationError)
    assert result.error.status_code == 500
    assert "server went away" in result.error.details["error"]


def test_refresh_failure_after_create_becomes_database_error(session, monkeypatch):
    def boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    monkeypatch.setattr(session, "refresh", boom)

    result = user_service.create_user(session, name="Ann", email="ann@x.com")
    assert isinstance(result.error, DatabaseOperationError)
    assert result.error.details["operation"] == "create user"


def test_refresh_failure_after_update_becomes_database_error(session, monkeypatch):
    user_id = user_service.create_user(session, name="Ann", email="ann@x.com").unwrap().id

    def boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    monkeypatch.setattr(session, "refresh", boom)

    result = user_service.update_user(session, user_id, name="Anne", email="ann@x.com")
    assert isinstance(result.error, DatabaseOperationError)


def test_missing_email_is_not_a_duplicate(session):
    result = user_service.create_user(session, name="Ann", email=None)
    assert isinstance(result.error, DatabaseOperationError)
    assert result.error.status_code == 500
    assert session.scalars(select(User)).all() == []
