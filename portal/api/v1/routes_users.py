# File: portal/api/v1/routes_users.py

"""
User resource routes.

GET routes render a view; POST/PUT/PATCH/DELETE redirect back to the
listing. Handlers never recover from errors: `unwrap()` raises the typed
error and the app-level PortalError handler builds the response.
"""

import logging

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from portal.api.deps import get_db
from portal.services import user_service
from portal.views import render

logger = logging.getLogger(__name__)

router = APIRouter()

USERS_PATH = "/users"


def _back_to_list() -> RedirectResponse:
    return RedirectResponse(url=USERS_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.get("", summary="List users")
def index(db: Session = Depends(get_db)):
    users = user_service.list_users(db).unwrap()
    return render("users/index", "Users List", users=users)


# Declared before /{user_id} so "new" is not captured as an id.
@router.get("/new", summary="Blank user form")
def new():
    return render("users/new", "New User", btnMsg="Create")


@router.get("/{user_id}", summary="Show one user")
def show(user_id: str, db: Session = Depends(get_db)):
    user = user_service.get_user(db, user_id).unwrap()
    logger.info("Showing user '%s'", user.name)
    return render("users/user", "User Profile", user=user)


@router.post("", summary="Create user")
def create(
    name: str = Form(...),
    email: str = Form(...),
    db: Session = Depends(get_db),
):
    user_service.create_user(db, name=name, email=email).unwrap()
    return _back_to_list()


@router.get("/{user_id}/edit", summary="Pre-filled user form")
def edit(user_id: str, db: Session = Depends(get_db)):
    user = user_service.get_user(db, user_id).unwrap()
    return render("users/edit", "Edit User", user=user, btnMsg="Update")


@router.api_route("/{user_id}", methods=["PUT", "PATCH"], summary="Update user")
def update(
    user_id: str,
    name: str = Form(...),
    email: str = Form(...),
    db: Session = Depends(get_db),
):
    user_service.update_user(db, user_id, name=name, email=email).unwrap()
    return _back_to_list()


@router.delete("/{user_id}", summary="Delete user")
def destroy(user_id: str, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id).unwrap()
    return _back_to_list()
