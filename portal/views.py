# File: portal/views.py

"""
Response building for GET routes.

A view is a plain structure: the view name, a page title and a payload.
`render()` converts ORM objects in the payload through their pydantic
read schema and returns the whole thing as JSON.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from portal.models.user import User
from portal.schemas.user import UserRead


def _serialize(value: Any) -> Any:
    if isinstance(value, User):
        return UserRead.model_validate(value).model_dump()
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value


def build_view(view: str, title: str, **payload: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"view": view, "title": title}
    for key, value in payload.items():
        body[key] = _serialize(value)
    return jsonable_encoder(body)


def render(view: str, title: str, status_code: int = 200, **payload: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=build_view(view, title, **payload))
