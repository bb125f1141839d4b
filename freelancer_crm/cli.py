#!/usr/bin/env python3
"""Freelancer CRM command line.

Usage:
    freelancer-crm login --email me@example.com
    freelancer-crm clients list --search acme
    freelancer-crm projects list --status IN_PROGRESS
    freelancer-crm reminders add --title "Send invoice" --due 2024-02-10 --client <id>
    freelancer-crm reminders list --view upcoming
    freelancer-crm dashboard --local
    freelancer-crm theme toggle
"""

import argparse
import asyncio
import getpass
import logging
import sys
from typing import Optional

from .app import AppContext
from .common.errors import CrmError, ValidationError
from .common.models import DashboardSummary, ProjectStatus
from .config import load_config
from .modules import routes
from .modules.forms import (
    client_draft_from_form,
    login_credentials_from_form,
    project_draft_from_form,
    register_credentials_from_form,
    reminder_draft_from_form,
)
from .modules.views import (
    ALL_STATUSES,
    ReminderView,
    filter_projects_by_status,
    filter_reminders,
    format_status,
    index_by_id,
    is_project_overdue,
    is_reminder_overdue,
    order_reminders,
    projects_for_client,
    reminder_context,
    reminders_for_client,
    reminders_for_project,
    search_clients,
    search_projects,
    search_reminders,
)

logger = logging.getLogger(__name__)


def _fmt_date(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def _form(args: argparse.Namespace, *fields: str) -> dict:
    """Collect the given option values, skipping ones not passed."""
    return {f: getattr(args, f) for f in fields if getattr(args, f, None) is not None}


# ══════════════════════════════════════════════════════════════════════════════
# AUTH
# ══════════════════════════════════════════════════════════════════════════════


async def cmd_login(ctx: AppContext, args: argparse.Namespace) -> int:
    password = args.password or getpass.getpass("Password: ")
    creds = login_credentials_from_form({"email": args.email, "password": password})
    session = await ctx.auth.login(creds)
    print(f"✅ Logged in as {session.user.name or session.user.email}")
    return 0


async def cmd_register(ctx: AppContext, args: argparse.Namespace) -> int:
    password = args.password or getpass.getpass("Password: ")
    creds = register_credentials_from_form(
        {"name": args.name, "email": args.email, "password": password}
    )
    session = await ctx.auth.register(creds)
    print(f"✅ Account created for {session.user.email}")
    return 0


async def cmd_logout(ctx: AppContext, args: argparse.Namespace) -> int:
    ctx.auth.logout()
    print("👋 Logged out")
    return 0


async def cmd_whoami(ctx: AppContext, args: argparse.Namespace) -> int:
    user = ctx.session.user
    if user is None:
        print("🔒 Not logged in")
        return 1
    print(f"👤 {user.name} <{user.email}> ({user.id})")
    return 0


# ══════════════════════════════════════════════════════════════════════════════
# CLIENTS
# ══════════════════════════════════════════════════════════════════════════════

CLIENT_FIELDS = ("name", "email", "phone", "company", "notes")


async def cmd_clients(ctx: AppContext, args: argparse.Namespace) -> int:
    owner = ctx.session.require_user().id

    if args.action == "list":
        clients = search_clients(await ctx.clients.list_all(owner), args.search)
        print(f"\n👥 Clients ({len(clients)})")
        for c in clients:
            company = f" · {c.company}" if c.company else ""
            print(f"   {c.id:12} {c.name}{company} <{c.email}>")
        return 0

    if args.action == "show":
        client, projects, reminders = await asyncio.gather(
            ctx.clients.get_by_id(args.id, owner),
            ctx.projects.list_by_client(args.id, owner),
            ctx.reminders.list_by_client(args.id, owner),
        )
        print(f"\n👤 {client.name}  ({routes.detail_path('client', client.id)})")
        print(f"   📧 {client.email}   📞 {client.phone}")
        if client.company:
            print(f"   🏢 {client.company}")
        if client.notes:
            print(f"   📝 {client.notes}")
        print(f"\n   Projects ({len(projects)}):")
        for p in projects:
            print(f"     • {p.title} [{format_status(p.status)}] due {_fmt_date(p.deadline)}")
        print(f"\n   Reminders ({len(reminders)}):")
        for r in order_reminders(reminders):
            mark = "✓" if r.completed else "○"
            print(f"     {mark} {r.title} ({_fmt_date(r.due_date)})")
        return 0

    if args.action == "add":
        draft = client_draft_from_form(_form(args, *CLIENT_FIELDS))
        client = await ctx.clients.create(draft, owner_id=owner)
        print(f"✅ Client created: {routes.detail_path('client', client.id)}")
        return 0

    if args.action == "edit":
        current = await ctx.clients.get_by_id(args.id, owner)
        data = {**current.model_dump(include=set(CLIENT_FIELDS)), **_form(args, *CLIENT_FIELDS)}
        draft = client_draft_from_form(data)
        await ctx.clients.update(args.id, owner, draft)
        print(f"✅ Client updated: {routes.detail_path('client', args.id)}")
        return 0

    if args.action == "delete":
        if not await ctx.clients.delete(args.id, owner):
            print(f"⚠️  Client not found: {args.id}")
            return 1
        print(f"🗑️  Client deleted: {args.id}")
        return 0

    return 2


# ══════════════════════════════════════════════════════════════════════════════
# PROJECTS
# ══════════════════════════════════════════════════════════════════════════════

PROJECT_FIELDS = ("client_id", "title", "description", "budget", "deadline", "status")


async def cmd_projects(ctx: AppContext, args: argparse.Namespace) -> int:
    owner = ctx.session.require_user().id

    if args.action == "list":
        projects, clients = await asyncio.gather(
            ctx.projects.list_all(owner), ctx.clients.list_all(owner)
        )
        clients = index_by_id(clients)
        projects = filter_projects_by_status(projects, args.status)
        projects = search_projects(projects, args.search, clients)
        print(f"\n📁 Projects ({len(projects)})")
        for p in projects:
            client = clients.get(p.client_id)
            overdue = " ⚠️ overdue" if is_project_overdue(p) else ""
            print(
                f"   {p.id:12} {p.title} [{format_status(p.status)}] "
                f"{client.name if client else '-'} · {p.budget:,.2f} · "
                f"due {_fmt_date(p.deadline)}{overdue}"
            )
        return 0

    if args.action == "show":
        project, reminders = await asyncio.gather(
            ctx.projects.get_by_id(args.id, owner),
            ctx.reminders.list_by_project(args.id, owner),
        )
        print(f"\n📁 {project.title}  [{format_status(project.status)}]")
        print(f"   Budget: {project.budget:,.2f}   Deadline: {_fmt_date(project.deadline)}")
        if project.description:
            print(f"   📝 {project.description}")
        print(f"\n   Reminders ({len(reminders)}):")
        for r in order_reminders(reminders):
            mark = "✓" if r.completed else "○"
            print(f"     {mark} {r.title} ({_fmt_date(r.due_date)})")
        print(f"\n   ➕ {routes.create_path('reminder', project.client_id, project.id)}")
        return 0

    if args.action == "add":
        draft = project_draft_from_form(_form(args, *PROJECT_FIELDS))
        project = await ctx.projects.create(draft, owner_id=owner)
        print(f"✅ Project created: {routes.detail_path('project', project.id)}")
        return 0

    if args.action == "edit":
        current = await ctx.projects.get_by_id(args.id, owner)
        base = current.model_dump(mode="json", include=set(PROJECT_FIELDS))
        draft = project_draft_from_form({**base, **_form(args, *PROJECT_FIELDS)})
        await ctx.projects.update(args.id, owner, draft)
        print(f"✅ Project updated: {routes.detail_path('project', args.id)}")
        return 0

    if args.action == "delete":
        if not await ctx.projects.delete(args.id, owner):
            print(f"⚠️  Project not found: {args.id}")
            return 1
        print(f"🗑️  Project deleted: {args.id}")
        return 0

    return 2


# ══════════════════════════════════════════════════════════════════════════════
# REMINDERS
# ══════════════════════════════════════════════════════════════════════════════

REMINDER_FIELDS = ("client_id", "project_id", "title", "description", "due_date")


async def cmd_reminders(ctx: AppContext, args: argparse.Namespace) -> int:
    owner = ctx.session.require_user().id

    if args.action == "list":
        reminders, clients, projects = await asyncio.gather(
            ctx.reminders.list_all(owner),
            ctx.clients.list_all(owner),
            ctx.projects.list_all(owner),
        )
        clients = index_by_id(clients)
        projects = index_by_id(projects)
        if args.client_id:
            reminders = reminders_for_client(reminders, args.client_id)
        if args.project_id:
            reminders = reminders_for_project(reminders, args.project_id)
        reminders = filter_reminders(reminders, args.view)
        reminders = order_reminders(search_reminders(reminders, args.search, clients, projects))
        print(f"\n🔔 Reminders: {args.view} ({len(reminders)})")
        for r in reminders:
            mark = "✓" if r.completed else "○"
            overdue = " ⚠️ overdue" if is_reminder_overdue(r) else ""
            print(
                f"   {mark} {r.id:12} {r.title} · {reminder_context(r, clients, projects)} "
                f"· {_fmt_date(r.due_date)}{overdue}"
            )
        return 0

    if args.action in ("add", "edit"):
        data = _form(args, *REMINDER_FIELDS)
        if args.action == "edit":
            current = await ctx.reminders.get_by_id(args.id, owner)
            base = current.model_dump(
                mode="json", include=set(REMINDER_FIELDS) | {"completed"}
            )
            data = {**base, **data}
        projects = None
        if data.get("client_id"):
            projects = projects_for_client(
                await ctx.projects.list_all(owner), data["client_id"]
            )
        draft = reminder_draft_from_form(data, projects)
        if data.get("project_id") and draft.project_id is None:
            print("⚠️  Project does not belong to the selected client, cleared")
        if args.action == "add":
            reminder = await ctx.reminders.create(draft, owner_id=owner)
            print(f"✅ Reminder created: {reminder.id}")
        else:
            await ctx.reminders.update(args.id, owner, draft)
            print(f"✅ Reminder updated: {args.id}")
        return 0

    if args.action == "toggle":
        reminder = await ctx.reminders.toggle_complete(args.id, owner)
        state = "complete" if reminder.completed else "incomplete"
        print(f"✅ Reminder marked as {state}")
        return 0

    if args.action == "delete":
        if not await ctx.reminders.delete(args.id, owner):
            print(f"⚠️  Reminder not found: {args.id}")
            return 1
        print(f"🗑️  Reminder deleted: {args.id}")
        return 0

    return 2


# ══════════════════════════════════════════════════════════════════════════════
# DASHBOARD & THEME
# ══════════════════════════════════════════════════════════════════════════════


def print_dashboard(summary: DashboardSummary) -> None:
    print("\n╔══════════════════════════════════════╗")
    print("║           📊 CRM DASHBOARD           ║")
    print("╚══════════════════════════════════════╝")
    print(f"   Clients:  {summary.total_clients}")
    print(f"   Projects: {summary.total_projects}")
    for status in ProjectStatus:
        count = summary.status_count(status)
        if count:
            print(f"     {format_status(status):12} {count}")
    print(f"\n   🔔 Upcoming reminders ({len(summary.upcoming_reminders)}):")
    for r in summary.upcoming_reminders:
        mark = "✓" if r.completed else "○"
        print(f"     {mark} {_fmt_date(r.due_date)}  {r.title}")


async def cmd_dashboard(ctx: AppContext, args: argparse.Namespace) -> int:
    owner = ctx.session.require_user().id
    if args.local:
        summary = await ctx.dashboard.compute_summary(
            owner, days=ctx.config.dashboard.window_days
        )
    else:
        summary = await ctx.dashboard.get_summary(owner)
    print_dashboard(summary)
    return 0


async def cmd_theme(ctx: AppContext, args: argparse.Namespace) -> int:
    if args.action == "toggle":
        ctx.theme.toggle()
    elif args.action == "system":
        ctx.theme.clear()
    elif args.action in ("light", "dark"):
        ctx.theme.set_theme(args.action)
    icon = "🌙" if ctx.theme.is_dark else "☀️"
    print(f"{icon} Theme: {ctx.theme.theme.value}")
    return 0


COMMANDS = {
    "login": cmd_login,
    "register": cmd_register,
    "logout": cmd_logout,
    "whoami": cmd_whoami,
    "clients": cmd_clients,
    "projects": cmd_projects,
    "reminders": cmd_reminders,
    "dashboard": cmd_dashboard,
    "theme": cmd_theme,
}


def _status_arg(value: str) -> str:
    if value.lower() == ALL_STATUSES:
        return ALL_STATUSES
    try:
        return ProjectStatus.parse(value).value
    except ValueError:
        choices = ", ".join(s.value for s in ProjectStatus)
        raise argparse.ArgumentTypeError(f"unknown status '{value}' ({choices})") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freelancer-crm",
        description="🗂️  Freelancer CRM: clients, projects & reminders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="Path to YAML config (default: $CONFIG_PATH)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("login", help="Log in")
    p.add_argument("--email", required=True)
    p.add_argument("--password", help="Prompted when omitted")

    p = sub.add_parser("register", help="Create an account")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--password", help="Prompted when omitted")

    sub.add_parser("logout", help="Clear the local session")
    sub.add_parser("whoami", help="Show the logged-in user")

    # clients
    p = sub.add_parser("clients", help="Manage clients")
    p.add_argument("action", choices=["list", "show", "add", "edit", "delete"])
    p.add_argument("id", nargs="?", help="Client id (show/edit/delete)")
    p.add_argument("--search", "-s", help="Filter by name, email or company")
    for field in CLIENT_FIELDS:
        p.add_argument(f"--{field}")

    # projects
    p = sub.add_parser("projects", help="Manage projects")
    p.add_argument("action", choices=["list", "show", "add", "edit", "delete"])
    p.add_argument("id", nargs="?", help="Project id (show/edit/delete)")
    p.add_argument("--search", "-s", help="Filter by title or client name")
    p.add_argument(
        "--status", type=_status_arg, default=ALL_STATUSES, help="Status filter or new status"
    )
    p.add_argument("--client", dest="client_id")
    p.add_argument("--title")
    p.add_argument("--description")
    p.add_argument("--budget", type=float)
    p.add_argument("--deadline", help="ISO date, e.g. 2024-06-30")

    # reminders
    p = sub.add_parser("reminders", help="Manage reminders")
    p.add_argument("action", choices=["list", "add", "edit", "toggle", "delete"])
    p.add_argument("id", nargs="?", help="Reminder id (edit/toggle/delete)")
    p.add_argument(
        "--view", choices=[v.value for v in ReminderView], default=ReminderView.ALL.value
    )
    p.add_argument("--search", "-s", help="Filter by title, description, client or project")
    p.add_argument("--client", dest="client_id")
    p.add_argument("--project", dest="project_id")
    p.add_argument("--title")
    p.add_argument("--description")
    p.add_argument("--due", dest="due_date", help="ISO date or datetime")

    p = sub.add_parser("dashboard", help="Show the dashboard summary")
    p.add_argument("--local", action="store_true", help="Aggregate client-side")

    p = sub.add_parser("theme", help="Show or change the theme")
    p.add_argument(
        "action", nargs="?", default="show", choices=["show", "light", "dark", "toggle", "system"]
    )
    return parser


def _check_args(args: argparse.Namespace) -> None:
    if args.command not in ("clients", "projects", "reminders"):
        return
    if args.action in {"show", "edit", "delete", "toggle"} and not args.id:
        raise ValidationError({"id": f"An id is required for '{args.action}'"})
    # --status doubles as list filter and form field
    if args.command == "projects" and args.action != "list" and args.status == ALL_STATUSES:
        args.status = None


async def run(ctx: AppContext, args: argparse.Namespace) -> int:
    _check_args(args)
    return await COMMANDS[args.command](ctx, args)


def main(argv: Optional[list] = None, ctx: Optional[AppContext] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=config.logging.level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx is None:
        ctx = AppContext.create(config)

    try:
        return asyncio.run(run(ctx, args))
    except ValidationError as e:
        print("❌ Invalid input:")
        for field, message in e.errors.items():
            print(f"   {field}: {message}")
        return 1
    except CrmError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
