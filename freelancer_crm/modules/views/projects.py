"""Project list derivations: status filter, search, status tally, overdue."""

from collections import defaultdict
from datetime import datetime
from typing import Iterable, Optional, Union

from ...common.dates import resolve_now
from ...common.models import Client, Project, ProjectStatus
from .lookup import Index, as_index, contains, normalize_query

ALL_STATUSES = "all"


def filter_projects_by_status(
    projects: Iterable[Project],
    status: Union[ProjectStatus, str] = ALL_STATUSES,
) -> list[Project]:
    """Exact status match; the 'all' sentinel passes everything through."""
    if status == ALL_STATUSES:
        return list(projects)
    status = ProjectStatus.parse(status)
    return [p for p in projects if p.status == status]


def search_projects(
    projects: Iterable[Project],
    query: Optional[str],
    clients: Index[Client] = None,
) -> list[Project]:
    """Match project title or the owning client's name."""
    q = normalize_query(query)
    if not q:
        return list(projects)
    clients = as_index(clients)
    result = []
    for p in projects:
        client = clients.get(p.client_id)
        if contains(p.title, q) or (client is not None and contains(client.name, q)):
            result.append(p)
    return result


def count_projects_by_status(projects: Iterable[Project]) -> dict[ProjectStatus, int]:
    """status -> count. Statuses with no projects are absent, not zero."""
    counts = defaultdict(int)
    for p in projects:
        counts[p.status] += 1
    return dict(counts)


def is_project_overdue(project: Project, now: Optional[datetime] = None) -> bool:
    """Deadline passed. Display only, nothing is blocked on it."""
    return project.deadline < resolve_now(now)


def projects_for_client(projects: Iterable[Project], client_id: Optional[str]) -> list[Project]:
    if not client_id:
        return []
    return [p for p in projects if p.client_id == client_id]


def format_status(status: Union[ProjectStatus, str]) -> str:
    """IN_PROGRESS -> 'In Progress'."""
    value = status.value if isinstance(status, ProjectStatus) else str(status)
    return " ".join(word.capitalize() for word in value.split("_"))
