"""Dashboard summary computed from already-fetched lists."""

from datetime import datetime
from typing import Iterable, Optional

from ...common.dates import resolve_now
from ...common.models import Client, DashboardSummary, Project, Reminder
from .projects import count_projects_by_status
from .reminders import DASHBOARD_WINDOW_DAYS, order_reminders, upcoming_for_dashboard


def build_dashboard_summary(
    clients: Iterable[Client],
    projects: Iterable[Project],
    reminders: Iterable[Reminder],
    now: Optional[datetime] = None,
    days: int = DASHBOARD_WINDOW_DAYS,
) -> DashboardSummary:
    clients = list(clients)
    projects = list(projects)
    upcoming = upcoming_for_dashboard(reminders, now=resolve_now(now), days=days)
    return DashboardSummary(
        total_clients=len(clients),
        total_projects=len(projects),
        upcoming_reminders=order_reminders(upcoming),
        projects_by_status=count_projects_by_status(projects),
    )
