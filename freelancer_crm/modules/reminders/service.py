"""Reminder gateway: CRUD on /reminders plus the filtered listings."""

import logging

from ...common.api import EntityGateway
from ...common.errors import NotFoundError
from ...common.models import Reminder, ReminderDraft

logger = logging.getLogger(__name__)


class ReminderGateway(EntityGateway[Reminder, ReminderDraft]):
    entity = "reminder"
    path = "/reminders"
    model = Reminder

    async def list_upcoming(self, owner_id: str) -> list[Reminder]:
        """Server-side upcoming list (the dashboard window)."""
        data = await self.api.get(f"{self.path}/upcoming")
        return self._parse_list(data, owner_id)

    async def list_by_client(self, client_id: str, owner_id: str) -> list[Reminder]:
        data = await self.api.get(
            self.path, params={"clientId": client_id, "userId": owner_id}
        )
        return [r for r in self._parse_list(data, owner_id) if r.client_id == client_id]

    async def list_by_project(self, project_id: str, owner_id: str) -> list[Reminder]:
        data = await self.api.get(f"/projects/{project_id}/reminders")
        return self._parse_list(data, owner_id)

    async def toggle_complete(self, reminder_id: str, owner_id: str) -> Reminder:
        """Flip the completed flag server-side, return the updated reminder."""
        try:
            data = await self.api.post(f"{self.path}/toggle/{reminder_id}", json={})
        except NotFoundError as e:
            raise NotFoundError(self.entity, reminder_id) from e
        reminder = self._check_owner(self._parse(data), reminder_id, owner_id)
        logger.info(
            f"Reminder {reminder_id} marked as "
            f"{'complete' if reminder.completed else 'incomplete'}"
        )
        return reminder
