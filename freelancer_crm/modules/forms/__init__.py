"""Form validation and draft building, run before any network call."""

from .schemas import (
    CLIENT_FORM,
    LOGIN_FORM,
    PROJECT_FORM,
    REGISTER_FORM,
    REMINDER_FORM,
    client_draft_from_form,
    login_credentials_from_form,
    project_choices,
    project_draft_from_form,
    reconcile_project,
    register_credentials_from_form,
    reminder_draft_from_form,
)
from .validation import Constraint, check, validate

__all__ = [
    "CLIENT_FORM",
    "LOGIN_FORM",
    "PROJECT_FORM",
    "REGISTER_FORM",
    "REMINDER_FORM",
    "Constraint",
    "check",
    "client_draft_from_form",
    "login_credentials_from_form",
    "project_choices",
    "project_draft_from_form",
    "reconcile_project",
    "register_credentials_from_form",
    "reminder_draft_from_form",
    "validate",
]
