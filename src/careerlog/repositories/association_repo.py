"""Repositories for the project-technology and project-process link tables."""

from sqlalchemy.ext.asyncio import AsyncSession

from careerlog.db.models import ProjectProcessRow, ProjectTechnologyRow
from careerlog.repositories.base import BaseRepository


class ProjectTechnologyRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProjectTechnologyRow)

    async def list_by_project(self, project_id: str) -> list[ProjectTechnologyRow]:
        return await self.list_by_field("project_id", project_id)

    async def list_by_technology(self, technology_id: str) -> list[ProjectTechnologyRow]:
        return await self.list_by_field("technology_id", technology_id)


class ProjectProcessRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProjectProcessRow)

    async def list_by_project(self, project_id: str) -> list[ProjectProcessRow]:
        return await self.list_by_field("project_id", project_id)

    async def list_by_process(self, process_id: str) -> list[ProjectProcessRow]:
        return await self.list_by_field("process_id", process_id)
