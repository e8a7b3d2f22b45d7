"""careerlog CLI: record projects and certifications, review skills."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from datetime import date

from careerlog.config import settings
from careerlog.db.engine import create_db_engine, create_session_factory, init_db
from careerlog.errors.exceptions import CareerLogError
from careerlog.logging_config import configure_logging
from careerlog.models.certification import CertificationDraft
from careerlog.models.enums import Industry, Role, StatusFilter, TeamSize
from careerlog.models.project import ProjectDraft
from careerlog.services import metrics
from careerlog.services.catalog import search_catalog
from careerlog.services.project_filter import (
    dashboard_summary,
    filter_projects,
    recent_projects,
    status_counts,
)
from careerlog.services.record_store import RecordStore, certification_view, project_view


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}' (expected YYYY-MM-DD)")


def _emit(payload, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, ensure_ascii=False, indent=2, default=str))


def _confirm(prompt: str) -> bool:
    answer = input(f"{prompt} [y/N] ").strip().lower()
    return answer in ("y", "yes")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

async def cmd_init(store: RecordStore, args: argparse.Namespace) -> None:
    created = await store.seed_processes()
    print(f"Database ready ({created} process stages added)")


def _project_draft(args: argparse.Namespace) -> ProjectDraft:
    return ProjectDraft(
        name=args.name,
        start_date=args.start,
        end_date=args.end,
        is_ongoing=args.ongoing,
        industry=args.industry,
        role=args.role,
        team_size=args.team_size,
        selected_technologies=args.tech or [],
        selected_processes=args.process or [],
        overview=args.overview,
        responsibilities=args.responsibilities,
        achievements=args.achievements,
    )


async def cmd_project_add(store: RecordStore, args: argparse.Namespace) -> None:
    draft = _project_draft(args)
    draft.validate_for_save()
    row = await store.create_project(draft)
    view = project_view(row)
    if args.json:
        _emit(view.model_dump(mode="json"), True)
    else:
        print(f"Created {view.project_id}: {view.name} ({view.duration_months} months)")


async def cmd_project_edit(store: RecordStore, args: argparse.Namespace) -> None:
    row = await store.get_project(args.project_id)
    draft = _project_draft(args)
    draft.validate_for_save()
    row = await store.update_project(row, draft)
    if args.json:
        _emit(project_view(row).model_dump(mode="json"), True)
    else:
        print(f"Updated {row.project_id}: {row.name}")


async def cmd_project_list(store: RecordStore, args: argparse.Namespace) -> None:
    rows = filter_projects(await store.list_projects(), args.search or "", StatusFilter(args.status))
    views = [project_view(r) for r in rows]
    if args.json:
        _emit([v.model_dump(mode="json") for v in views], True)
        return
    if not views:
        print("No projects found.")
        return
    for v in views:
        period = f"{v.start_date:%Y.%m} - " + ("ongoing" if v.is_ongoing else f"{v.end_date:%Y.%m}" if v.end_date else "")
        techs = ", ".join(v.technology_names[:5])
        print(f"{v.project_id}  {v.name}  [{period}, {v.duration_months}m]  {techs}")


async def cmd_project_show(store: RecordStore, args: argparse.Namespace) -> None:
    view = project_view(await store.get_project(args.project_id))
    if args.json:
        _emit(view.model_dump(mode="json"), True)
        return
    print(view.name)
    print(f"  Period:       {view.start_date} - {'ongoing' if view.is_ongoing else view.end_date or ''}")
    print(f"  Duration:     {view.duration_months} months")
    for label, value in (
        ("Industry", view.industry),
        ("Role", view.role),
        ("Team size", view.team_size),
    ):
        if value:
            print(f"  {label + ':':<13} {value}")
    if view.technology_names:
        print(f"  Technologies: {', '.join(view.technology_names)}")
    if view.process_names:
        print(f"  Processes:    {' > '.join(view.process_names)}")
    for label, value in (
        ("Overview", view.overview),
        ("Responsibilities", view.responsibilities),
        ("Achievements", view.achievements),
    ):
        if value:
            print(f"\n{label}\n  {value}")


async def cmd_project_delete(store: RecordStore, args: argparse.Namespace) -> None:
    row = await store.get_project(args.project_id)
    if not args.yes and not _confirm(f"Delete '{row.name}'? This cannot be undone."):
        print("Cancelled.")
        return
    removed = await store.delete_project(row)
    print(f"Deleted {args.project_id} ({removed} links removed)")


def _certification_draft(args: argparse.Namespace) -> CertificationDraft:
    return CertificationDraft(
        name=args.name,
        obtained_date=args.obtained,
        expiration_date=args.expires,
        certification_number=args.number,
        memo=args.memo,
    )


async def cmd_cert_add(store: RecordStore, args: argparse.Namespace) -> None:
    draft = _certification_draft(args)
    draft.validate_for_save()
    row = await store.create_certification(draft)
    print(f"Created {row.certification_id}: {row.name} ({metrics.status_text(row)})")


async def cmd_cert_update(store: RecordStore, args: argparse.Namespace) -> None:
    row = await store.get_certification(args.certification_id)
    draft = _certification_draft(args)
    draft.validate_for_save()
    row = await store.update_certification(row, draft)
    print(f"Updated {row.certification_id}: {row.name} ({metrics.status_text(row)})")


async def cmd_cert_delete(store: RecordStore, args: argparse.Namespace) -> None:
    row = await store.get_certification(args.certification_id)
    if not args.yes and not _confirm(f"Delete '{row.name}'?"):
        print("Cancelled.")
        return
    await store.delete_certification(row)
    print(f"Deleted {args.certification_id}")


async def cmd_cert_list(store: RecordStore, args: argparse.Namespace) -> None:
    rows = metrics.sorted_certifications(await store.list_certifications())
    views = [certification_view(r) for r in rows]
    if args.json:
        _emit([v.model_dump(mode="json") for v in views], True)
        return
    counts = metrics.certification_counts(rows)
    print(f"{counts.total} certifications, {counts.expiring} expiring, {counts.expired} expired")
    for v in views:
        print(f"{v.certification_id}  {v.name}  obtained {v.obtained_date}  [{v.status_text}]")


async def cmd_skills(store: RecordStore, args: argparse.Namespace) -> None:
    ranking = metrics.experience_ranking(await store.list_projects())
    if args.json:
        _emit([t.model_dump() for t in ranking], True)
        return
    if not ranking:
        print("No technology data yet.")
        return
    for tech in ranking:
        stars = "*" * tech.experience_level
        print(f"{tech.name:<20} {tech.experience_months:>4} months  {stars}")


async def cmd_summary(store: RecordStore, args: argparse.Namespace) -> None:
    projects = await store.list_projects()
    summary = dashboard_summary(projects, await store.list_certifications())
    recent = [project_view(p) for p in recent_projects(projects)]
    if args.json:
        _emit(
            {
                "summary": summary.model_dump(),
                "status_counts": {str(k): v for k, v in status_counts(projects).items()},
                "recent_projects": [r.model_dump(mode="json") for r in recent],
            },
            True,
        )
        return
    print(f"Projects:       {summary.project_count}")
    print(f"Technologies:   {summary.technology_count}")
    print(f"Certifications: {summary.certification_count} ({summary.expiring_certification_count} expiring)")
    if recent:
        print("\nRecent projects")
        for r in recent:
            print(f"  {r.start_date:%Y.%m}  {r.name}")


async def cmd_catalog(store: RecordStore, args: argparse.Namespace) -> None:
    for category, names in search_catalog(args.search or ""):
        print(f"{category.display_name} ({category.value})")
        print(f"  {', '.join(names)}")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def _add_project_fields(p: argparse.ArgumentParser) -> None:
    p.add_argument("--name", required=True)
    p.add_argument("--start", type=_parse_date, required=True, help="Start date (YYYY-MM-DD)")
    p.add_argument("--end", type=_parse_date, default=None, help="End date (YYYY-MM-DD)")
    p.add_argument("--ongoing", action="store_true")
    p.add_argument("--industry", choices=[i.value for i in Industry])
    p.add_argument("--role", choices=[r.value for r in Role])
    p.add_argument("--team-size", choices=[t.value for t in TeamSize])
    p.add_argument("--tech", action="append", help="Technology name (repeatable)")
    p.add_argument("--process", action="append", help="Process stage name (repeatable)")
    p.add_argument("--overview")
    p.add_argument("--responsibilities")
    p.add_argument("--achievements")


def _add_certification_fields(p: argparse.ArgumentParser) -> None:
    p.add_argument("--name", required=True)
    p.add_argument("--obtained", type=_parse_date, required=True)
    p.add_argument("--expires", type=_parse_date, default=None)
    p.add_argument("--number")
    p.add_argument("--memo")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="careerlog",
        description="CareerLog, a local record of projects, skills and certifications",
    )
    parser.add_argument("--database-url", default=None, help="Override CAREERLOG_DATABASE_URL")
    parser.add_argument("--log-level", default=None, help="debug/info/warning/error")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create tables and seed process stages").set_defaults(func=cmd_init)

    project = sub.add_parser("project", help="Manage projects")
    psub = project.add_subparsers(dest="project_command", required=True)

    p = psub.add_parser("add", help="Record a new project")
    _add_project_fields(p)
    p.set_defaults(func=cmd_project_add)

    p = psub.add_parser("edit", help="Replace a project's details")
    p.add_argument("project_id")
    _add_project_fields(p)
    p.set_defaults(func=cmd_project_edit)

    p = psub.add_parser("list", help="List projects")
    p.add_argument("--search", help="Match name, technology, industry or role")
    p.add_argument("--status", choices=[s.value for s in StatusFilter], default=StatusFilter.ALL.value)
    p.set_defaults(func=cmd_project_list)

    p = psub.add_parser("show", help="Show one project")
    p.add_argument("project_id")
    p.set_defaults(func=cmd_project_show)

    p = psub.add_parser("delete", help="Delete a project and its links")
    p.add_argument("project_id")
    p.add_argument("--yes", action="store_true", help="Skip confirmation")
    p.set_defaults(func=cmd_project_delete)

    cert = sub.add_parser("cert", help="Manage certifications")
    csub = cert.add_subparsers(dest="cert_command", required=True)

    p = csub.add_parser("add", help="Record a certification")
    _add_certification_fields(p)
    p.set_defaults(func=cmd_cert_add)

    p = csub.add_parser("update", help="Replace a certification's details")
    p.add_argument("certification_id")
    _add_certification_fields(p)
    p.set_defaults(func=cmd_cert_update)

    p = csub.add_parser("delete", help="Delete a certification")
    p.add_argument("certification_id")
    p.add_argument("--yes", action="store_true", help="Skip confirmation")
    p.set_defaults(func=cmd_cert_delete)

    csub.add_parser("list", help="List certifications").set_defaults(func=cmd_cert_list)

    sub.add_parser("skills", help="Technology experience ranking").set_defaults(func=cmd_skills)
    sub.add_parser("summary", help="Dashboard counts and recent projects").set_defaults(func=cmd_summary)

    p = sub.add_parser("catalog", help="Browse the predefined technology catalog")
    p.add_argument("--search")
    p.set_defaults(func=cmd_catalog)

    return parser


async def _run(args: argparse.Namespace) -> None:
    engine = create_db_engine(args.database_url)
    try:
        await init_db(engine)
        async with create_session_factory(engine)() as session:
            await args.func(RecordStore(session), args)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        log_level=args.log_level or settings.log_level,
        json_output=settings.json_logs,
    )

    try:
        asyncio.run(_run(args))
    except CareerLogError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
