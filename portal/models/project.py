# File: portal/models/project.py

"""
Project model.

Declared storage only: no routes read or write projects yet.
`created_by` and `contributors` are free text, not foreign keys to users.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal.models.base import Base, new_id, utcnow


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    project_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_on: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    modified_on: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contributors: Mapped[str | None] = mapped_column(Text, nullable=True)
    tasks: Mapped[str | None] = mapped_column(Text, nullable=True)
