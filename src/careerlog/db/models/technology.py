"""Technology table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from careerlog.db.base import Base, CreatedAtMixin

if TYPE_CHECKING:
    from careerlog.db.models.association import ProjectTechnologyRow


class TechnologyRow(Base, CreatedAtMixin):
    __tablename__ = "technologies"

    technology_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    is_custom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    project_links: Mapped[list[ProjectTechnologyRow]] = relationship(
        back_populates="technology", passive_deletes="all"
    )
