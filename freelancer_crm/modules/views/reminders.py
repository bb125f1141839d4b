"""Reminder list derivations: ordering, view tabs, search, overdue.

Two different "upcoming" definitions exist and are kept apart:

- filter_reminders(..., ReminderView.UPCOMING): list page tab. Open reminders
  only, due strictly after now.
- upcoming_for_dashboard(...): dashboard card. Due within [now, now + days],
  both bounds inclusive, completed or not.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, Optional

from ...common.dates import resolve_now
from ...common.models import Client, Project, Reminder
from .lookup import Index, as_index, contains, normalize_query

DASHBOARD_WINDOW_DAYS = 7


class ReminderView(str, Enum):
    """Tabs of the reminder list."""

    ALL = "all"
    UPCOMING = "upcoming"
    COMPLETED = "completed"


def order_reminders(reminders: Iterable[Reminder]) -> list[Reminder]:
    """Open reminders first, earliest due first; then completed, latest due first.

    Stable: equal due dates keep their input order.
    """
    reminders = list(reminders)
    open_ = sorted((r for r in reminders if not r.completed), key=lambda r: r.due_date)
    done = sorted(
        (r for r in reminders if r.completed), key=lambda r: r.due_date, reverse=True
    )
    return open_ + done


def filter_reminders(
    reminders: Iterable[Reminder],
    view: ReminderView = ReminderView.ALL,
    now: Optional[datetime] = None,
) -> list[Reminder]:
    view = ReminderView(view)
    if view is ReminderView.UPCOMING:
        now = resolve_now(now)
        return [r for r in reminders if not r.completed and r.due_date > now]
    if view is ReminderView.COMPLETED:
        return [r for r in reminders if r.completed]
    return list(reminders)


def upcoming_for_dashboard(
    reminders: Iterable[Reminder],
    now: Optional[datetime] = None,
    days: int = DASHBOARD_WINDOW_DAYS,
) -> list[Reminder]:
    """Reminders due in [now, now + days]; completion is ignored."""
    now = resolve_now(now)
    until = now + timedelta(days=days)
    return [r for r in reminders if now <= r.due_date <= until]


def search_reminders(
    reminders: Iterable[Reminder],
    query: Optional[str],
    clients: Index[Client] = None,
    projects: Index[Project] = None,
) -> list[Reminder]:
    """Match title, description, client name or project title."""
    q = normalize_query(query)
    if not q:
        return list(reminders)
    clients = as_index(clients)
    projects = as_index(projects)

    def _match(r: Reminder) -> bool:
        client = clients.get(r.client_id) if r.client_id else None
        project = projects.get(r.project_id) if r.project_id else None
        return (
            contains(r.title, q)
            or contains(r.description, q)
            or (client is not None and contains(client.name, q))
            or (project is not None and contains(project.title, q))
        )

    return [r for r in reminders if _match(r)]


def is_reminder_overdue(reminder: Reminder, now: Optional[datetime] = None) -> bool:
    return not reminder.completed and reminder.due_date < resolve_now(now)


def reminders_for_client(reminders: Iterable[Reminder], client_id: str) -> list[Reminder]:
    return [r for r in reminders if r.client_id == client_id]


def reminders_for_project(reminders: Iterable[Reminder], project_id: str) -> list[Reminder]:
    return [r for r in reminders if r.project_id == project_id]


def reminder_context(
    reminder: Reminder,
    clients: Index[Client] = None,
    projects: Index[Project] = None,
) -> str:
    """'Client - Project' label of the list view, 'General' when unattached."""
    clients = as_index(clients)
    projects = as_index(projects)
    parts = []
    if reminder.client_id:
        client = clients.get(reminder.client_id)
        parts.append(client.name if client else "Unknown Client")
    if reminder.project_id:
        project = projects.get(reminder.project_id)
        parts.append(project.title if project else "Unknown Project")
    return " - ".join(parts) if parts else "General"
