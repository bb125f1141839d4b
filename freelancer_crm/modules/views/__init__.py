"""Derived views: pure filter/sort/aggregate functions over fetched lists.

No I/O and no mutation of the input lists. Time-dependent functions take an
optional `now` so callers (and tests) can pin the clock.
"""

from .clients import search_clients
from .dashboard import build_dashboard_summary
from .lookup import index_by_id
from .projects import (
    ALL_STATUSES,
    count_projects_by_status,
    filter_projects_by_status,
    format_status,
    is_project_overdue,
    projects_for_client,
    search_projects,
)
from .reminders import (
    DASHBOARD_WINDOW_DAYS,
    ReminderView,
    filter_reminders,
    is_reminder_overdue,
    order_reminders,
    reminder_context,
    reminders_for_client,
    reminders_for_project,
    search_reminders,
    upcoming_for_dashboard,
)

__all__ = [
    "ALL_STATUSES",
    "DASHBOARD_WINDOW_DAYS",
    "ReminderView",
    "build_dashboard_summary",
    "count_projects_by_status",
    "filter_projects_by_status",
    "filter_reminders",
    "format_status",
    "index_by_id",
    "is_project_overdue",
    "is_reminder_overdue",
    "order_reminders",
    "projects_for_client",
    "reminder_context",
    "reminders_for_client",
    "reminders_for_project",
    "search_clients",
    "search_projects",
    "search_reminders",
    "upcoming_for_dashboard",
]
