"""Form definitions and draft builders for clients, projects, reminders and auth."""

from typing import Any, Iterable, Mapping, Optional

from ...common.models import (
    ClientDraft,
    LoginCredentials,
    Project,
    ProjectDraft,
    ProjectStatus,
    RegisterCredentials,
    ReminderDraft,
)
from .validation import (
    Constraint,
    check,
    is_date,
    is_email,
    min_length,
    number_at_least,
    one_of,
    required,
)

CLIENT_FORM = [
    Constraint("name", required, "Name is required"),
    Constraint("email", is_email, "Invalid email address"),
    Constraint("phone", required, "Phone number is required"),
]

PROJECT_FORM = [
    Constraint("title", required, "Title is required"),
    Constraint("client_id", required, "Client is required"),
    Constraint("budget", number_at_least(0), "Budget must be a positive number"),
    Constraint("deadline", required, "Deadline is required"),
    Constraint("deadline", is_date, "Deadline must be a valid date"),
    Constraint("status", one_of(s.value for s in ProjectStatus), "Invalid status"),
]

REMINDER_FORM = [
    Constraint("title", required, "Title is required"),
    Constraint("due_date", required, "Due date is required"),
    Constraint("due_date", is_date, "Due date must be a valid date"),
]

LOGIN_FORM = [
    Constraint("email", is_email, "Please enter a valid email address"),
    Constraint("password", min_length(6), "Password must be at least 6 characters"),
]

REGISTER_FORM = [
    Constraint("name", required, "Name is required"),
    Constraint("email", is_email, "Please enter a valid email address"),
    Constraint("password", min_length(6), "Password must be at least 6 characters"),
]


def _blank_to_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def client_draft_from_form(data: Mapping[str, Any]) -> ClientDraft:
    check(data, CLIENT_FORM)
    return ClientDraft(
        name=data["name"].strip(),
        email=data["email"].strip(),
        phone=data["phone"].strip(),
        company=_blank_to_none(data.get("company")),
        notes=_blank_to_none(data.get("notes")),
    )


def project_draft_from_form(data: Mapping[str, Any]) -> ProjectDraft:
    data = {"budget": 0, "status": ProjectStatus.PLANNED.value, **data}
    check(data, PROJECT_FORM)
    return ProjectDraft(
        client_id=data["client_id"],
        title=data["title"].strip(),
        description=_blank_to_none(data.get("description")),
        budget=float(data["budget"]),
        deadline=data["deadline"],
        status=data["status"],
    )


def project_choices(projects: Iterable[Project], client_id: Optional[str]) -> list[Project]:
    """Projects selectable on the reminder form: the client's, or all without a client."""
    projects = list(projects)
    if not client_id:
        return projects
    return [p for p in projects if p.client_id == client_id]


def reconcile_project(
    client_id: Optional[str], project_id: Optional[str], projects: Iterable[Project]
) -> Optional[str]:
    """Drop a project selection that does not belong to the selected client."""
    if not client_id or not project_id:
        return project_id
    if any(p.id == project_id and p.client_id == client_id for p in projects):
        return project_id
    return None


def reminder_draft_from_form(
    data: Mapping[str, Any], projects: Optional[Iterable[Project]] = None
) -> ReminderDraft:
    """Validate and build; with `projects` known, a mismatched project is cleared."""
    check(data, REMINDER_FORM)
    client_id = _blank_to_none(data.get("client_id"))
    project_id = _blank_to_none(data.get("project_id"))
    if projects is not None:
        project_id = reconcile_project(client_id, project_id, projects)
    return ReminderDraft(
        client_id=client_id,
        project_id=project_id,
        title=data["title"].strip(),
        description=_blank_to_none(data.get("description")),
        due_date=data["due_date"],
        completed=bool(data.get("completed", False)),
    )


def login_credentials_from_form(data: Mapping[str, Any]) -> LoginCredentials:
    check(data, LOGIN_FORM)
    return LoginCredentials(email=data["email"].strip(), password=data["password"])


def register_credentials_from_form(data: Mapping[str, Any]) -> RegisterCredentials:
    check(data, REGISTER_FORM)
    return RegisterCredentials(
        name=data["name"].strip(), email=data["email"].strip(), password=data["password"]
    )
