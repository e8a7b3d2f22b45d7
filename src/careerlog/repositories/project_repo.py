"""Project repository."""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from careerlog.db.models import ProjectProcessRow, ProjectRow, ProjectTechnologyRow
from careerlog.repositories.base import BaseRepository


class ProjectRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProjectRow)

    def _select(self):
        return super()._select().options(
            selectinload(ProjectRow.technology_links).selectinload(ProjectTechnologyRow.technology),
            selectinload(ProjectRow.process_links).selectinload(ProjectProcessRow.process),
        )

    async def get(self, project_id: str) -> ProjectRow | None:
        return await self.get_by_id("project_id", project_id)

    async def list_all(self) -> list[ProjectRow]:
        """All projects, most recently started first."""
        stmt = (
            self._select()
            .order_by(ProjectRow.start_date.desc(), ProjectRow.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
