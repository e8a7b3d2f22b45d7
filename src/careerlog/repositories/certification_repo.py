"""Certification repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from careerlog.db.models import CertificationRow
from careerlog.repositories.base import BaseRepository


class CertificationRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, CertificationRow)

    async def get(self, certification_id: str) -> CertificationRow | None:
        return await self.get_by_id("certification_id", certification_id)

    async def list_all(self) -> list[CertificationRow]:
        """All certifications, most recently obtained first."""
        stmt = select(CertificationRow).order_by(
            CertificationRow.obtained_date.desc(), CertificationRow.name
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
