"""Development process stage table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careerlog.db.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from careerlog.db.models.association import ProjectProcessRow


class ProcessRow(Base, CreatedAtMixin):
    __tablename__ = "processes"

    process_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    order: Mapped[int] = mapped_column("sort_order", Integer, nullable=False, default=0)

    project_links: Mapped[list[ProjectProcessRow]] = relationship(
        back_populates="process", passive_deletes="all"
    )
