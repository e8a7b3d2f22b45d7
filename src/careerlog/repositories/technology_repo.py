"""Technology repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from careerlog.db.models import ProjectTechnologyRow, TechnologyRow
from careerlog.repositories.base import BaseRepository


class TechnologyRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, TechnologyRow)

    def _select(self):
        return super()._select().options(
            selectinload(TechnologyRow.project_links).selectinload(ProjectTechnologyRow.project),
        )

    async def get(self, technology_id: str) -> TechnologyRow | None:
        return await self.get_by_id("technology_id", technology_id)

    async def get_by_name(self, name: str) -> TechnologyRow | None:
        """Exact-name lookup; no eager loading so pending rows are not refreshed."""
        stmt = select(TechnologyRow).where(TechnologyRow.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[TechnologyRow]:
        stmt = (
            self._select()
            .order_by(TechnologyRow.name)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
