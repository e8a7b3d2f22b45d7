"""The record store: create, edit and delete career records.

All mutations go through one ``AsyncSession``. Each public operation stages its
changes and finishes with ``commit()``, which is all-or-nothing: on failure the
session is rolled back and a ``PersistenceError`` is raised so the caller can
decide whether to retry. Draft validation happens before the store is called.
"""

import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from careerlog.db.base import utcnow
from careerlog.db.models import (
    CertificationRow,
    ProcessRow,
    ProjectProcessRow,
    ProjectRow,
    ProjectTechnologyRow,
    TechnologyRow,
)
from careerlog.errors.exceptions import NotFoundError, PersistenceError
from careerlog.logging_config import bind_operation_context, clear_operation_context
from careerlog.models.certification import Certification, CertificationDraft
from careerlog.models.enums import DevelopmentProcess, TechnologyCategory
from careerlog.models.project import Project, ProjectDraft
from careerlog.repositories.association_repo import (
    ProjectProcessRepository,
    ProjectTechnologyRepository,
)
from careerlog.repositories.certification_repo import CertificationRepository
from careerlog.repositories.process_repo import ProcessRepository
from careerlog.repositories.project_repo import ProjectRepository
from careerlog.repositories.technology_repo import TechnologyRepository
from careerlog.services import metrics
from careerlog.services.catalog import category_for, process_order
from careerlog.services.id_generator import generate_id

logger = logging.getLogger(__name__)


class RecordStore:
    """Entity store over the six career-record tables."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.projects = ProjectRepository(session)
        self.technologies = TechnologyRepository(session)
        self.processes = ProcessRepository(session)
        self.certifications = CertificationRepository(session)
        self.project_technologies = ProjectTechnologyRepository(session)
        self.project_processes = ProjectProcessRepository(session)

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    async def commit(self, operation: str = "commit") -> None:
        """Persist every pending change, or none of them."""
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            logger.error("Commit failed during %s: %s", operation, exc)
            await self.session.rollback()
            raise PersistenceError(operation, exc) from exc

    # ------------------------------------------------------------------
    # Technologies and processes
    # ------------------------------------------------------------------

    async def find_or_create_technology(self, name: str) -> TechnologyRow:
        """Return the technology called ``name``, creating it on a miss.

        New records are classified by the predefined catalog; names the
        catalog does not list are custom and land in the "other" category.
        """
        existing = await self.technologies.get_by_name(name)
        if existing is not None:
            return existing

        category = category_for(name)
        row = await self.technologies.create(
            technology_id=generate_id("tech_"),
            name=name,
            category=(category or TechnologyCategory.OTHER).value,
            is_custom=category is None,
        )
        logger.debug("Created technology %s (category=%s)", name, row.category)
        return row

    async def find_or_create_process(self, name: str, order: int) -> ProcessRow:
        """Return the process stage called ``name``; ``order`` only applies on creation."""
        existing = await self.processes.get_by_name(name)
        if existing is not None:
            return existing

        row = await self.processes.create(
            process_id=generate_id("proc_"),
            name=name,
            order=order,
        )
        logger.debug("Created process %s (order=%d)", name, order)
        return row

    async def seed_processes(self) -> int:
        """Create any missing canonical process stages. Returns how many were added."""
        created = 0
        for stage in DevelopmentProcess:
            if await self.processes.get_by_name(stage.value) is None:
                await self.find_or_create_process(stage.value, stage.order)
                created += 1
        await self.commit("seed_processes")
        if created:
            logger.info("Seeded %d process stages", created)
        return created

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def get_project(self, project_id: str) -> ProjectRow:
        row = await self.projects.get(project_id)
        if row is None:
            raise NotFoundError("Project", project_id)
        return row

    async def list_projects(self) -> list[ProjectRow]:
        return await self.projects.list_all()

    async def create_project(self, draft: ProjectDraft) -> ProjectRow:
        """Insert a project and link its selected technologies and processes."""
        project_id = generate_id("proj_")
        bind_operation_context("create_project", project_id)
        try:
            now = utcnow()
            project = ProjectRow(
                project_id=project_id,
                created_at=now,
                updated_at=now,
                **self._project_fields(draft),
            )
            self.session.add(project)

            for name in draft.selected_technologies:
                await self._link_technology(project, name)
            for index, name in enumerate(draft.selected_processes):
                await self._link_process(project, name, index)

            await self.commit("create_project")
            logger.info(
                "Project created: %s (%d technologies, %d processes)",
                project.name,
                len(draft.selected_technologies),
                len(draft.selected_processes),
            )
            return await self.get_project(project_id)
        finally:
            clear_operation_context()

    async def update_project(self, project: ProjectRow, draft: ProjectDraft) -> ProjectRow:
        """Replace a project's fields and re-link its technologies and processes.

        Links whose name is still selected are kept; the rest are removed.
        """
        bind_operation_context("update_project", project.project_id)
        try:
            await self.projects.update(project, **self._project_fields(draft))
            project.updated_at = utcnow()

            wanted_techs = set(draft.selected_technologies)
            for link in await self.project_technologies.list_by_project(project.project_id):
                technology = await self.session.get(TechnologyRow, link.technology_id)
                if technology.name in wanted_techs:
                    wanted_techs.discard(technology.name)
                else:
                    await self.project_technologies.delete(link)
            for name in draft.selected_technologies:
                if name in wanted_techs:
                    await self._link_technology(project, name)

            wanted_procs = set(draft.selected_processes)
            for link in await self.project_processes.list_by_project(project.project_id):
                process = await self.session.get(ProcessRow, link.process_id)
                if process.name in wanted_procs:
                    wanted_procs.discard(process.name)
                else:
                    await self.project_processes.delete(link)
            for index, name in enumerate(draft.selected_processes):
                if name in wanted_procs:
                    await self._link_process(project, name, index)

            await self.commit("update_project")
            logger.info("Project updated: %s", project.name)
            return await self.get_project(project.project_id)
        finally:
            clear_operation_context()

    async def delete_project(self, project: ProjectRow) -> int:
        """Delete a project in two committed phases. Returns links removed.

        Phase one removes every association row that references the project
        and commits; phase two removes the project itself and commits. A
        failure in either phase raises ``PersistenceError`` and never leaves a
        link pointing at a deleted project. Technologies and processes are
        left in place.
        """
        project_id = project.project_id
        bind_operation_context("delete_project", project_id)
        try:
            tech_links = await self.project_technologies.list_by_project(project_id)
            proc_links = await self.project_processes.list_by_project(project_id)
            technology_ids = {link.technology_id for link in tech_links}
            process_ids = {link.process_id for link in proc_links}

            for link in tech_links:
                await self.project_technologies.delete(link)
            for link in proc_links:
                await self.project_processes.delete(link)
            await self.commit("delete_project.associations")

            # Reload so the project no longer holds the deleted links
            project = await self.get_project(project_id)
            await self.projects.delete(project)
            await self.commit("delete_project")

            # Refresh the other side of the removed links
            for technology_id in technology_ids:
                await self.technologies.get(technology_id)
            for process_id in process_ids:
                await self.processes.get(process_id)

            removed = len(tech_links) + len(proc_links)
            logger.info("Project deleted: %s (%d links removed)", project.name, removed)
            return removed
        finally:
            clear_operation_context()

    async def _link_technology(self, project: ProjectRow, name: str) -> ProjectTechnologyRow:
        technology = await self.find_or_create_technology(name)
        link = ProjectTechnologyRow(
            link_id=generate_id("ptech_"), project=project, technology=technology
        )
        self.session.add(link)
        return link

    async def _link_process(self, project: ProjectRow, name: str, index: int) -> ProjectProcessRow:
        # Canonical stages keep their fixed position; custom names follow them
        order = process_order(name)
        if order is None:
            order = len(DevelopmentProcess) + index
        process = await self.find_or_create_process(name, order)
        link = ProjectProcessRow(
            link_id=generate_id("pproc_"), project=project, process=process
        )
        self.session.add(link)
        return link

    @staticmethod
    def _project_fields(draft: ProjectDraft) -> dict:
        return {
            "name": draft.name.strip(),
            "start_date": draft.start_date,
            "end_date": draft.effective_end_date,
            "is_ongoing": draft.is_ongoing,
            "industry": draft.industry.value if draft.industry else None,
            "role": draft.role.value if draft.role else None,
            "team_size": draft.team_size.value if draft.team_size else None,
            "overview": draft.overview,
            "responsibilities": draft.responsibilities,
            "achievements": draft.achievements,
        }

    # ------------------------------------------------------------------
    # Technology / process removal
    # ------------------------------------------------------------------

    async def list_technologies(self) -> list[TechnologyRow]:
        return await self.technologies.list_all()

    async def list_processes(self) -> list[ProcessRow]:
        return await self.processes.list_all()

    async def delete_technology(self, technology: TechnologyRow) -> int:
        """Remove a technology and its links; linked projects stay. Returns links removed."""
        links = await self.project_technologies.list_by_technology(technology.technology_id)
        for link in links:
            await self.project_technologies.delete(link)
        await self.commit("delete_technology.associations")

        await self.technologies.delete(technology)
        await self.commit("delete_technology")
        logger.info("Technology deleted: %s (%d links removed)", technology.name, len(links))
        return len(links)

    async def delete_process(self, process: ProcessRow) -> int:
        """Remove a process stage and its links; linked projects stay. Returns links removed."""
        links = await self.project_processes.list_by_process(process.process_id)
        for link in links:
            await self.project_processes.delete(link)
        await self.commit("delete_process.associations")

        await self.processes.delete(process)
        await self.commit("delete_process")
        logger.info("Process deleted: %s (%d links removed)", process.name, len(links))
        return len(links)

    # ------------------------------------------------------------------
    # Certifications
    # ------------------------------------------------------------------

    async def get_certification(self, certification_id: str) -> CertificationRow:
        row = await self.certifications.get(certification_id)
        if row is None:
            raise NotFoundError("Certification", certification_id)
        return row

    async def list_certifications(self) -> list[CertificationRow]:
        return await self.certifications.list_all()

    async def create_certification(self, draft: CertificationDraft) -> CertificationRow:
        now = utcnow()
        row = await self.certifications.create(
            certification_id=generate_id("cert_"),
            name=draft.name,
            obtained_date=draft.obtained_date,
            expiration_date=draft.expiration_date,
            certification_number=draft.certification_number,
            memo=draft.memo,
            created_at=now,
            updated_at=now,
        )
        await self.commit("create_certification")
        logger.info("Certification created: %s", row.name)
        return row

    async def update_certification(
        self, certification: CertificationRow, draft: CertificationDraft
    ) -> CertificationRow:
        await self.certifications.update(
            certification,
            name=draft.name,
            obtained_date=draft.obtained_date,
            expiration_date=draft.expiration_date,
            certification_number=draft.certification_number,
            memo=draft.memo,
            updated_at=utcnow(),
        )
        await self.commit("update_certification")
        logger.info("Certification updated: %s", certification.name)
        return certification

    async def delete_certification(self, certification: CertificationRow) -> None:
        await self.certifications.delete(certification)
        await self.commit("delete_certification")
        logger.info("Certification deleted: %s", certification.name)


# ---------------------------------------------------------------------------
# Read views
# ---------------------------------------------------------------------------

def project_view(row: ProjectRow, today: date | None = None) -> Project:
    """Build the read model for a loaded project row."""
    return Project(
        project_id=row.project_id,
        name=row.name,
        start_date=row.start_date,
        end_date=row.end_date,
        is_ongoing=row.is_ongoing,
        industry=row.industry,
        role=row.role,
        team_size=row.team_size,
        overview=row.overview,
        responsibilities=row.responsibilities,
        achievements=row.achievements,
        duration_months=metrics.duration_in_months(row, today),
        technology_names=metrics.technology_names(row),
        process_names=metrics.sort_by_process_order(metrics.process_names(row)),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def certification_view(row: CertificationRow, today: date | None = None) -> Certification:
    return Certification(
        certification_id=row.certification_id,
        name=row.name,
        obtained_date=row.obtained_date,
        expiration_date=row.expiration_date,
        certification_number=row.certification_number,
        memo=row.memo,
        is_expiring=metrics.is_expiring(row, today),
        is_expired=metrics.is_expired(row, today),
        status_text=metrics.status_text(row, today),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
