"""Tests for derived project, technology and certification values."""

from datetime import date

import pytest
from dateutil.relativedelta import relativedelta

from careerlog.db.models import (
    CertificationRow,
    ProcessRow,
    ProjectProcessRow,
    ProjectRow,
    ProjectTechnologyRow,
    TechnologyRow,
)
from careerlog.services import metrics

TODAY = date(2026, 10, 19)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _project(name: str, start: date, end: date | None = None, ongoing: bool = False) -> ProjectRow:
    return ProjectRow(project_id=f"proj_{name}", name=name, start_date=start, end_date=end, is_ongoing=ongoing)


def _technology(name: str) -> TechnologyRow:
    return TechnologyRow(technology_id=f"tech_{name}", name=name, category="other", is_custom=True)


def _link(project: ProjectRow, technology: TechnologyRow) -> None:
    ProjectTechnologyRow(link_id=f"ptech_{project.name}_{technology.name}", project=project, technology=technology)


def _certification(expiration: date | None) -> CertificationRow:
    return CertificationRow(
        certification_id="cert_test",
        name="AWS Solutions Architect",
        obtained_date=date(2023, 1, 1),
        expiration_date=expiration,
    )


# ---------------------------------------------------------------------------
# Duration
# ---------------------------------------------------------------------------

class TestDuration:
    def test_six_month_project(self):
        project = _project("ECサイト", date(2024, 1, 1), date(2024, 7, 1))
        assert metrics.duration_in_months(project) == 6

    def test_same_day_floors_to_one(self):
        project = _project("spike", date(2024, 3, 15), date(2024, 3, 15))
        assert metrics.duration_in_months(project) == 1

    def test_partial_month_is_not_counted(self):
        # Month ends clamp; a day short of the anniversary does not count
        project = _project("short", date(2024, 1, 31), date(2024, 2, 29))
        assert metrics.duration_in_months(project) == 1
        project = _project("longer", date(2024, 1, 15), date(2024, 4, 14))
        assert metrics.duration_in_months(project) == 2

    def test_ongoing_project_runs_until_today(self):
        project = _project("current", date(2025, 10, 1), ongoing=True)
        assert metrics.duration_in_months(project, today=TODAY) == 12

    def test_ongoing_project_started_this_month(self):
        project = _project("new", date(2026, 10, 1), ongoing=True)
        assert metrics.duration_in_months(project, today=TODAY) == 1

    def test_start_in_future_still_one(self):
        project = _project("planned", date(2027, 1, 1), ongoing=True)
        assert metrics.duration_in_months(project, today=TODAY) == 1

    def test_months_between_spans_years(self):
        assert metrics.months_between(date(2022, 11, 10), date(2025, 2, 10)) == 27


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

class TestExperience:
    @pytest.mark.parametrize(
        "months, level",
        [(0, 1), (5, 1), (6, 2), (11, 2), (12, 3), (23, 3), (24, 4), (35, 4), (36, 5), (120, 5)],
    )
    def test_level_buckets(self, months, level):
        assert metrics.experience_level(months) == level

    def test_technology_experience_sums_linked_projects(self):
        react = _technology("React")
        first = _project("first", date(2024, 1, 1), date(2024, 7, 1))
        second = _project("second", date(2023, 1, 1), date(2023, 11, 1))
        _link(first, react)
        _link(second, react)

        months = metrics.experience_months(react, today=TODAY)
        assert months == 16
        assert metrics.experience_level(months) == 3

    def test_unlinked_technology_has_no_experience(self):
        assert metrics.experience_months(_technology("Rust"), today=TODAY) == 0

    def test_aggregate_over_projects(self):
        react, go = _technology("React"), _technology("Go")
        a = _project("a", date(2024, 1, 1), date(2024, 7, 1))
        b = _project("b", date(2023, 1, 1), date(2023, 11, 1))
        _link(a, react)
        _link(a, go)
        _link(b, react)

        result = metrics.technology_experience([a, b], today=TODAY)
        assert [t.name for t in result] == ["Go", "React"]
        assert result[1].experience_months == 16
        assert result[1].experience_level == 3

        ranking = metrics.experience_ranking([a, b], today=TODAY)
        assert [t.name for t in ranking] == ["React", "Go"]


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

class TestNames:
    def test_technology_names_sorted(self):
        project = _project("p", date(2024, 1, 1), date(2024, 2, 1))
        for name in ("TypeScript", "AWS", "React"):
            _link(project, _technology(name))
        assert metrics.technology_names(project) == ["AWS", "React", "TypeScript"]

    def test_process_names_alphabetical_not_by_order(self):
        project = _project("p", date(2024, 1, 1), date(2024, 2, 1))
        for name, order in (("b-stage", 0), ("a-stage", 5)):
            ProjectProcessRow(
                link_id=f"pproc_{name}",
                project=project,
                process=ProcessRow(process_id=f"proc_{name}", name=name, order=order),
            )
        assert metrics.process_names(project) == ["a-stage", "b-stage"]

    def test_sort_by_process_order(self):
        names = ["単体テスト", "custom review", "要件定義", "実装", "another custom"]
        assert metrics.sort_by_process_order(names) == [
            "要件定義", "実装", "単体テスト", "another custom", "custom review",
        ]


# ---------------------------------------------------------------------------
# Certifications
# ---------------------------------------------------------------------------

class TestCertificationStatus:
    def test_expiring_within_window(self):
        cert = _certification(TODAY + relativedelta(months=2))
        assert metrics.is_expiring(cert, today=TODAY) is True
        assert metrics.is_expired(cert, today=TODAY) is False
        assert metrics.status_text(cert, today=TODAY) == "renewal due 2026.12"

    def test_expiring_boundary_is_inclusive(self):
        cert = _certification(TODAY + relativedelta(months=3))
        assert metrics.is_expiring(cert, today=TODAY) is True
        cert = _certification(TODAY + relativedelta(months=3, days=1))
        assert metrics.is_expiring(cert, today=TODAY) is False

    def test_expired_takes_priority(self):
        cert = _certification(date(2026, 1, 31))
        assert metrics.is_expired(cert, today=TODAY) is True
        assert metrics.is_expiring(cert, today=TODAY) is True
        assert metrics.status_text(cert, today=TODAY) == "expired"

    def test_expires_today_is_expired(self):
        assert metrics.is_expired(_certification(TODAY), today=TODAY) is True

    def test_valid(self):
        cert = _certification(date(2029, 1, 1))
        assert metrics.status_text(cert, today=TODAY) == "valid"

    def test_no_expiration_date(self):
        cert = _certification(None)
        assert metrics.is_expiring(cert, today=TODAY) is False
        assert metrics.is_expired(cert, today=TODAY) is False
        assert metrics.status_text(cert, today=TODAY) == "valid"

    def test_custom_window(self):
        cert = _certification(TODAY + relativedelta(months=5))
        assert metrics.is_expiring(cert, today=TODAY) is False
        assert metrics.is_expiring(cert, today=TODAY, window_months=6) is True

    def test_counts_and_order(self):
        older = _certification(date(2025, 1, 1))
        older.obtained_date = date(2020, 5, 1)
        newer = _certification(TODAY + relativedelta(months=1))
        newer.obtained_date = date(2024, 5, 1)
        plain = _certification(None)
        plain.obtained_date = date(2022, 5, 1)

        counts = metrics.certification_counts([older, newer, plain], today=TODAY)
        assert (counts.total, counts.expiring, counts.expired) == (3, 2, 1)
        assert metrics.sorted_certifications([older, newer, plain]) == [newer, plain, older]
