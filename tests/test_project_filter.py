"""Tests for project search, status filtering, ordering and dashboard counts."""

from datetime import date
from itertools import product

import pytest

from careerlog.db.models import CertificationRow, ProjectRow, ProjectTechnologyRow, TechnologyRow
from careerlog.models.enums import Industry, Role, StatusFilter
from careerlog.services.project_filter import (
    dashboard_summary,
    filter_by_search,
    filter_by_status,
    filter_projects,
    matches_search,
    recent_projects,
    sort_by_start_date,
    status_counts,
)

TODAY = date(2026, 10, 19)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_TECHS: dict[str, TechnologyRow] = {}


def _project(
    name: str,
    start: date,
    end: date | None = None,
    techs: tuple[str, ...] = (),
    industry: str | None = None,
    role: str | None = None,
) -> ProjectRow:
    project = ProjectRow(
        project_id=f"proj_{name}",
        name=name,
        start_date=start,
        end_date=end,
        is_ongoing=end is None,
        industry=industry,
        role=role,
    )
    for tech in techs:
        technology = _TECHS.setdefault(
            tech, TechnologyRow(technology_id=f"tech_{tech}", name=tech, category="other", is_custom=True)
        )
        ProjectTechnologyRow(link_id=f"ptech_{name}_{tech}", project=project, technology=technology)
    return project


@pytest.fixture
def projects() -> list[ProjectRow]:
    return [
        _project("ECサイト構築", date(2024, 1, 1), date(2024, 7, 1), ("React", "TypeScript"), Industry.WEB, Role.FRONTEND_ENGINEER),
        _project("勘定系システム刷新", date(2022, 4, 1), date(2023, 9, 30), ("Java", "Oracle"), Industry.FINANCE, Role.SYSTEM_ENGINEER),
        _project("Inventory API", date(2026, 6, 1), None, ("Go", "PostgreSQL"), Industry.LOGISTICS, Role.BACKEND_ENGINEER),
        _project("Data platform", date(2025, 2, 1), None, ("Python", "AWS"), None, Role.ARCHITECT),
        _project("Landing page", date(2026, 5, 1), date(2026, 6, 30), ("react",), Industry.MEDIA, None),
    ]


def _names(rows: list[ProjectRow]) -> list[str]:
    return [p.name for p in rows]


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

class TestSearch:
    def test_empty_query_matches_all(self, projects):
        assert filter_by_search(projects, "") == projects

    def test_whitespace_query_is_matched_literally(self, projects):
        assert _names(filter_by_search(projects, " ")) == ["Inventory API", "Data platform", "Landing page"]

    def test_trailing_space_is_part_of_the_query(self):
        rows = [_project("Go tooling", date(2024, 1, 1)), _project("Google ads", date(2024, 1, 1))]
        assert _names(filter_by_search(rows, "Go ")) == ["Go tooling"]
        assert _names(filter_by_search(rows, "go")) == ["Go tooling", "Google ads"]

    def test_matches_name_case_insensitive(self, projects):
        assert _names(filter_by_search(projects, "inventory")) == ["Inventory API"]

    def test_matches_technology(self, projects):
        assert _names(filter_by_search(projects, "REACT")) == ["ECサイト構築", "Landing page"]

    def test_matches_industry_label(self, projects):
        assert _names(filter_by_search(projects, "金融")) == ["勘定系システム刷新"]

    def test_matches_role_label(self, projects):
        assert _names(filter_by_search(projects, "アーキテクト")) == ["Data platform"]

    def test_no_match(self, projects):
        assert filter_by_search(projects, "COBOL") == []

    def test_missing_labels_do_not_match(self):
        project = _project("bare", date(2024, 1, 1), date(2024, 2, 1))
        assert matches_search(project, "その他") is False


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

class TestStatus:
    def test_all(self, projects):
        assert filter_by_status(projects, StatusFilter.ALL, TODAY) == projects

    def test_ongoing(self, projects):
        assert _names(filter_by_status(projects, StatusFilter.ONGOING, TODAY)) == ["Inventory API", "Data platform"]

    def test_completed(self, projects):
        assert _names(filter_by_status(projects, StatusFilter.COMPLETED, TODAY)) == [
            "ECサイト構築", "勘定系システム刷新", "Landing page",
        ]

    def test_recent_uses_six_calendar_months(self, projects):
        # cutoff is 2026-04-19
        assert _names(filter_by_status(projects, StatusFilter.RECENT, TODAY)) == ["Inventory API", "Landing page"]

    def test_recent_boundary_is_inclusive(self):
        project = _project("edge", date(2026, 4, 19), date(2026, 5, 1))
        assert filter_by_status([project], StatusFilter.RECENT, TODAY) == [project]

    def test_status_counts(self, projects):
        counts = status_counts(projects, TODAY)
        assert counts == {
            StatusFilter.ALL: 5,
            StatusFilter.ONGOING: 2,
            StatusFilter.COMPLETED: 3,
            StatusFilter.RECENT: 2,
        }


# ---------------------------------------------------------------------------
# Combined
# ---------------------------------------------------------------------------

class TestCombined:
    def test_search_and_status_are_conjunctive(self, projects):
        rows = filter_projects(projects, "react", StatusFilter.RECENT, TODAY)
        assert _names(rows) == ["Landing page"]

    @pytest.mark.parametrize("query", ["", "react", "a", "金融", "engineer", "zzz"])
    def test_filters_commute(self, projects, query):
        for status in StatusFilter:
            text_first = filter_by_status(filter_by_search(projects, query), status, TODAY)
            status_first = filter_by_search(filter_by_status(projects, status, TODAY), query)
            assert {p.project_id for p in text_first} == {p.project_id for p in status_first}

    def test_default_order_is_start_date_descending(self, projects):
        assert _names(filter_projects(projects, today=TODAY)) == [
            "Inventory API", "Landing page", "Data platform", "ECサイト構築", "勘定系システム刷新",
        ]

    def test_sort_does_not_mutate_input(self, projects):
        before = list(projects)
        sort_by_start_date(projects)
        assert projects == before

    def test_recent_projects_truncates_to_two(self, projects):
        assert _names(recent_projects(projects)) == ["Inventory API", "Landing page"]
        assert _names(recent_projects(projects, limit=1)) == ["Inventory API"]


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

def _cert(name: str, expiration: date | None) -> CertificationRow:
    return CertificationRow(
        certification_id=f"cert_{name}", name=name, obtained_date=date(2022, 1, 1), expiration_date=expiration
    )


def test_dashboard_summary(projects):
    certs = [
        _cert("expiring", date(2026, 12, 1)),
        _cert("expired", date(2025, 1, 1)),
        _cert("valid", date(2030, 1, 1)),
        _cert("permanent", None),
    ]
    summary = dashboard_summary(projects, certs, today=TODAY)
    assert summary.project_count == 5
    # "React" and "react" are distinct names
    assert summary.technology_count == 9
    assert summary.certification_count == 4
    assert summary.expiring_certification_count == 2


def test_dashboard_summary_empty():
    summary = dashboard_summary([], [], today=TODAY)
    assert summary.model_dump() == {
        "project_count": 0,
        "technology_count": 0,
        "certification_count": 0,
        "expiring_certification_count": 0,
    }


def test_commutativity_over_generated_collections():
    starts = [date(2026, 9, 1), date(2025, 1, 1)]
    ends = [None, date(2026, 10, 1)]
    rows = [
        _project(f"gen-{i}", start, end, ("Vue.js",) if i % 2 else ())
        for i, (start, end) in enumerate(product(starts, ends))
    ]
    for query, status in product(["vue", "gen-1", ""], StatusFilter):
        a = filter_by_status(filter_by_search(rows, query), status, TODAY)
        b = filter_by_search(filter_by_status(rows, status, TODAY), query)
        assert a == b
