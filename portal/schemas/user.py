# File: portal/schemas/user.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    name: Optional[str] = None
    email: str


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_on: datetime
    modified_on: Optional[datetime] = None
    last_login: Optional[datetime] = None
