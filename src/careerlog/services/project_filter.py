"""In-memory search, status filtering and ordering of loaded projects."""

from collections.abc import Iterable
from datetime import date

from dateutil.relativedelta import relativedelta

from careerlog.config import settings
from careerlog.db.models import CertificationRow, ProjectRow
from careerlog.models.enums import StatusFilter
from careerlog.models.summary import DashboardSummary
from careerlog.services.metrics import is_expiring, technology_names


def matches_search(project: ProjectRow, query: str) -> bool:
    """Case-insensitive substring match on name, technologies, industry or role.

    An empty query matches every project.
    """
    if not query:
        return True
    needle = query.casefold()
    if needle in project.name.casefold():
        return True
    if any(needle in name.casefold() for name in technology_names(project)):
        return True
    for label in (project.industry, project.role):
        if label and needle in label.casefold():
            return True
    return False


def recent_cutoff(today: date | None = None, window_months: int | None = None) -> date:
    if window_months is None:
        window_months = settings.recent_window_months
    return (today or date.today()) - relativedelta(months=window_months)


def matches_status(
    project: ProjectRow,
    status: StatusFilter,
    today: date | None = None,
    window_months: int | None = None,
) -> bool:
    if status == StatusFilter.ONGOING:
        return project.is_ongoing
    if status == StatusFilter.COMPLETED:
        return not project.is_ongoing
    if status == StatusFilter.RECENT:
        return project.start_date >= recent_cutoff(today, window_months)
    return True


def filter_by_search(projects: Iterable[ProjectRow], query: str) -> list[ProjectRow]:
    return [p for p in projects if matches_search(p, query)]


def filter_by_status(
    projects: Iterable[ProjectRow],
    status: StatusFilter,
    today: date | None = None,
    window_months: int | None = None,
) -> list[ProjectRow]:
    return [p for p in projects if matches_status(p, status, today, window_months)]


def sort_by_start_date(projects: Iterable[ProjectRow]) -> list[ProjectRow]:
    """Most recently started first."""
    return sorted(projects, key=lambda p: p.start_date, reverse=True)


def filter_projects(
    projects: Iterable[ProjectRow],
    query: str = "",
    status: StatusFilter = StatusFilter.ALL,
    today: date | None = None,
) -> list[ProjectRow]:
    """Apply search and status filters together, in default list order."""
    filtered = [
        p for p in projects
        if matches_search(p, query) and matches_status(p, status, today)
    ]
    return sort_by_start_date(filtered)


def recent_projects(projects: Iterable[ProjectRow], limit: int | None = None) -> list[ProjectRow]:
    if limit is None:
        limit = settings.recent_projects_limit
    return sort_by_start_date(projects)[:limit]


def status_counts(
    projects: Iterable[ProjectRow], today: date | None = None
) -> dict[StatusFilter, int]:
    """Number of projects each status filter would show."""
    projects = list(projects)
    return {
        status: len(filter_by_status(projects, status, today))
        for status in StatusFilter
    }


def dashboard_summary(
    projects: Iterable[ProjectRow],
    certifications: Iterable[CertificationRow],
    today: date | None = None,
) -> DashboardSummary:
    projects = list(projects)
    certifications = list(certifications)
    distinct_technologies = {name for p in projects for name in technology_names(p)}
    return DashboardSummary(
        project_count=len(projects),
        technology_count=len(distinct_technologies),
        certification_count=len(certifications),
        expiring_certification_count=sum(
            1 for c in certifications if is_expiring(c, today)
        ),
    )
