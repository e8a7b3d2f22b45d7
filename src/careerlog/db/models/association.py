"""Project-technology and project-process association tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careerlog.db.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from careerlog.db.models.process import ProcessRow
    from careerlog.db.models.project import ProjectRow
    from careerlog.db.models.technology import TechnologyRow


class ProjectTechnologyRow(Base, CreatedAtMixin):
    __tablename__ = "project_technologies"

    link_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("projects.project_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    technology_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("technologies.technology_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    project: Mapped[ProjectRow] = relationship(back_populates="technology_links")
    technology: Mapped[TechnologyRow] = relationship(back_populates="project_links")

    __table_args__ = (
        UniqueConstraint("project_id", "technology_id", name="uq_project_technology"),
    )


class ProjectProcessRow(Base, CreatedAtMixin):
    __tablename__ = "project_processes"

    link_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("projects.project_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    process_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("processes.process_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    project: Mapped[ProjectRow] = relationship(back_populates="process_links")
    process: Mapped[ProcessRow] = relationship(back_populates="project_links")

    __table_args__ = (
        UniqueConstraint("project_id", "process_id", name="uq_project_process"),
    )
