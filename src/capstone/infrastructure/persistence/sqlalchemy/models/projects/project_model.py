"""SQLAlchemy model for research projects."""

from __future__ import annotations

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from capstone.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ProjectModel(Base, TimestampMixin):
    """Database model for projects. ``project_code`` is the join code."""

    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    project_code: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    abstract: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    paper_standard: Mapped[str] = mapped_column(String(20), nullable=False)
    project_type: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    program: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    course: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    section: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    keywords: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)

    document_reference: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, code={self.project_code})>"
