"""Reminders: dated follow-ups, optionally tied to a client and project."""

from .service import ReminderGateway

__all__ = ["ReminderGateway"]
