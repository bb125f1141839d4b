"""Shared data models across modules."""

from .base import (
    Client,
    ClientDraft,
    DashboardSummary,
    Instant,
    LoginCredentials,
    Project,
    ProjectDraft,
    ProjectStatus,
    RegisterCredentials,
    Reminder,
    ReminderDraft,
    Session,
    User,
)

__all__ = [
    'Client', 'ClientDraft', 'DashboardSummary', 'Instant', 'LoginCredentials',
    'Project', 'ProjectDraft', 'ProjectStatus', 'RegisterCredentials',
    'Reminder', 'ReminderDraft', 'Session', 'User',
]
