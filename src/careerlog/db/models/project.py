"""Project table."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careerlog.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from careerlog.db.models.association import ProjectProcessRow, ProjectTechnologyRow


class ProjectRow(Base, TimestampMixin):
    __tablename__ = "projects"

    project_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_ongoing: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    industry: Mapped[str | None] = mapped_column(String(100), nullable=True)
    role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    team_size: Mapped[str | None] = mapped_column(String(100), nullable=True)
    overview: Mapped[str | None] = mapped_column(Text, nullable=True)
    responsibilities: Mapped[str | None] = mapped_column(Text, nullable=True)
    achievements: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Association rows are removed explicitly before the project (two-phase delete)
    technology_links: Mapped[list[ProjectTechnologyRow]] = relationship(
        back_populates="project", passive_deletes="all"
    )
    process_links: Mapped[list[ProjectProcessRow]] = relationship(
        back_populates="project", passive_deletes="all"
    )
