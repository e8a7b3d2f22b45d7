"""Development process repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from careerlog.db.models import ProcessRow, ProjectProcessRow
from careerlog.repositories.base import BaseRepository


class ProcessRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProcessRow)

    def _select(self):
        return super()._select().options(
            selectinload(ProcessRow.project_links).selectinload(ProjectProcessRow.project),
        )

    async def get(self, process_id: str) -> ProcessRow | None:
        return await self.get_by_id("process_id", process_id)

    async def get_by_name(self, name: str) -> ProcessRow | None:
        stmt = select(ProcessRow).where(ProcessRow.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[ProcessRow]:
        """All stages in canonical order."""
        stmt = (
            self._select()
            .order_by(ProcessRow.order, ProcessRow.name)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
