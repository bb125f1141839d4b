"""Pydantic models for the CRM entities.

Wire format is camelCase JSON (userId, clientId, dueDate, createdAt);
attributes are snake_case. Both spellings are accepted on input.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..dates import parse_instant

Instant = Annotated[datetime, BeforeValidator(parse_instant)]


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: Any) -> "ProjectStatus":
        """Accept members, upper- or lower-case values ('in_progress')."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


class CrmModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        """JSON body for the API, camelCase keys."""
        exclude = {"user_id"} if getattr(self, "user_id", None) is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


# --- Identity ---


class User(CrmModel):
    id: str
    name: str = ""
    email: str = ""
    created_at: Optional[Instant] = None


class Session(CrmModel):
    """Authenticated identity plus bearer token, persisted as {user, token}."""

    user: User
    token: str


class LoginCredentials(CrmModel):
    email: str
    password: str


class RegisterCredentials(CrmModel):
    name: str
    email: str
    password: str


# --- Clients ---


class ClientDraft(CrmModel):
    """Client payload without server-assigned fields."""

    user_id: Optional[str] = None
    name: str
    email: str
    phone: str
    company: Optional[str] = None
    notes: Optional[str] = None


class Client(ClientDraft):
    id: str
    created_at: Optional[Instant] = None


# --- Projects ---


class ProjectDraft(CrmModel):
    """Project payload without server-assigned fields."""

    user_id: Optional[str] = None
    client_id: str
    title: str
    description: Optional[str] = None
    budget: float = Field(0, ge=0)
    deadline: Instant
    status: ProjectStatus = ProjectStatus.PLANNED

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, v):
        return ProjectStatus.parse(v)


class Project(ProjectDraft):
    id: str
    created_at: Optional[Instant] = None


# --- Reminders ---


class ReminderDraft(CrmModel):
    """Reminder payload without server-assigned fields."""

    user_id: Optional[str] = None
    client_id: Optional[str] = None
    project_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    due_date: Instant
    completed: bool = False


class Reminder(ReminderDraft):
    id: str
    created_at: Optional[Instant] = None


# --- Dashboard ---


class DashboardSummary(CrmModel):
    """Derived counts for the dashboard; never persisted."""

    total_clients: int = 0
    total_projects: int = 0
    upcoming_reminders: list[Reminder] = []
    # Statuses without projects are absent, not zero
    projects_by_status: dict[ProjectStatus, int] = {}

    @field_validator("projects_by_status", mode="before")
    @classmethod
    def _normalize_status_keys(cls, v):
        if isinstance(v, dict):
            return {ProjectStatus.parse(k): n for k, n in v.items()}
        return v

    def status_count(self, status: ProjectStatus) -> int:
        return self.projects_by_status.get(status, 0)
