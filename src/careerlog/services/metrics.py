"""Derived values computed from stored records.

Everything here is read-only and synchronous. Functions take the loaded ORM
rows (relationships already populated by the repositories) and an optional
``today`` so callers and tests can pin the clock.
"""

from collections.abc import Iterable
from datetime import date

from dateutil.relativedelta import relativedelta

from careerlog.config import settings
from careerlog.db.models import CertificationRow, ProjectRow, TechnologyRow
from careerlog.models.summary import CertificationCounts, TechnologyExperience
from careerlog.services.catalog import process_order

EXPIRED_TEXT = "expired"
VALID_TEXT = "valid"

# (exclusive upper bound in months, level)
_LEVEL_THRESHOLDS = [(6, 1), (12, 2), (24, 3), (36, 4)]


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end`` (negative if end is earlier)."""
    delta = relativedelta(end, start)
    return delta.years * 12 + delta.months


def duration_in_months(project: ProjectRow, today: date | None = None) -> int:
    """Project length in calendar months, never less than 1.

    Projects without an end date run until ``today``.
    """
    end = project.end_date or today or date.today()
    return max(months_between(project.start_date, end), 1)


def experience_level(months: int) -> int:
    """Bucket accumulated months into a 1-5 experience level."""
    for bound, level in _LEVEL_THRESHOLDS:
        if months < bound:
            return level
    return 5


def experience_months(technology: TechnologyRow, today: date | None = None) -> int:
    """Sum of project durations over every project linked to ``technology``."""
    return sum(duration_in_months(link.project, today) for link in technology.project_links)


def technology_names(project: ProjectRow) -> list[str]:
    return sorted(link.technology.name for link in project.technology_links)


def process_names(project: ProjectRow) -> list[str]:
    """Linked process names in alphabetical order (not stage order)."""
    return sorted(link.process.name for link in project.process_links)


def sort_by_process_order(names: Iterable[str]) -> list[str]:
    """Order stage names canonically; unknown names sort alphabetically after them."""

    def key(name: str) -> tuple[int, int, str]:
        order = process_order(name)
        if order is None:
            return (1, 0, name)
        return (0, order, name)

    return sorted(names, key=key)


def technology_experience(
    projects: Iterable[ProjectRow], today: date | None = None
) -> list[TechnologyExperience]:
    """Per-technology accumulated months across ``projects``, sorted by name."""
    totals: dict[str, int] = {}
    for project in projects:
        months = duration_in_months(project, today)
        for name in technology_names(project):
            totals[name] = totals.get(name, 0) + months

    return [
        TechnologyExperience(
            name=name,
            experience_months=months,
            experience_level=experience_level(months),
        )
        for name, months in sorted(totals.items())
    ]


def experience_ranking(
    projects: Iterable[ProjectRow], today: date | None = None
) -> list[TechnologyExperience]:
    """Same as technology_experience but longest experience first."""
    return sorted(
        technology_experience(projects, today),
        key=lambda t: t.experience_months,
        reverse=True,
    )


# ---------------------------------------------------------------------------
# Certifications
# ---------------------------------------------------------------------------

def is_expired(certification: CertificationRow, today: date | None = None) -> bool:
    if certification.expiration_date is None:
        return False
    return certification.expiration_date <= (today or date.today())


def is_expiring(
    certification: CertificationRow,
    today: date | None = None,
    window_months: int | None = None,
) -> bool:
    """True when the expiration date falls on or before today plus the window."""
    if certification.expiration_date is None:
        return False
    if window_months is None:
        window_months = settings.expiring_window_months
    horizon = (today or date.today()) + relativedelta(months=window_months)
    return certification.expiration_date <= horizon


def status_text(
    certification: CertificationRow,
    today: date | None = None,
    window_months: int | None = None,
) -> str:
    if is_expired(certification, today):
        return EXPIRED_TEXT
    if is_expiring(certification, today, window_months):
        return f"renewal due {certification.expiration_date:%Y.%m}"
    return VALID_TEXT


def sorted_certifications(certifications: Iterable[CertificationRow]) -> list[CertificationRow]:
    """Most recently obtained first."""
    return sorted(certifications, key=lambda c: c.obtained_date, reverse=True)


def certification_counts(
    certifications: Iterable[CertificationRow],
    today: date | None = None,
    window_months: int | None = None,
) -> CertificationCounts:
    counts = CertificationCounts()
    for cert in certifications:
        counts.total += 1
        if is_expiring(cert, today, window_months):
            counts.expiring += 1
        if is_expired(cert, today):
            counts.expired += 1
    return counts
