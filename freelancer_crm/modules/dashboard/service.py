"""Dashboard gateway.

Two ways to get a summary:
- get_summary(): the server's /dashboard endpoint
- compute_summary(): fetch clients/projects/reminders and aggregate locally
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

from ...common.api import ApiClient, parse_response
from ...common.models import DashboardSummary
from ..clients import ClientGateway
from ..projects import ProjectGateway
from ..reminders import ReminderGateway
from ..views import DASHBOARD_WINDOW_DAYS, build_dashboard_summary

logger = logging.getLogger(__name__)


class DashboardGateway:
    path = "/dashboard"

    def __init__(
        self,
        api: ApiClient,
        clients: ClientGateway,
        projects: ProjectGateway,
        reminders: ReminderGateway,
    ):
        self.api = api
        self.clients = clients
        self.projects = projects
        self.reminders = reminders

    async def get_summary(self, owner_id: str) -> DashboardSummary:
        data = await self.api.get(self.path)
        return parse_response(DashboardSummary, data or {}, "dashboard summary")

    async def compute_summary(
        self,
        owner_id: str,
        now: Optional[datetime] = None,
        days: int = DASHBOARD_WINDOW_DAYS,
    ) -> DashboardSummary:
        """Aggregate client-side from the three entity lists."""
        results = await asyncio.gather(
            self.clients.list_all(owner_id),
            self.projects.list_all(owner_id),
            self.reminders.list_all(owner_id),
            return_exceptions=True,
        )
        # All three have settled; the first failure fails the whole summary
        for result in results:
            if isinstance(result, BaseException):
                raise result
        clients, projects, reminders = results
        logger.info(
            f"Dashboard from {len(clients)} clients, {len(projects)} projects, "
            f"{len(reminders)} reminders"
        )
        return build_dashboard_summary(clients, projects, reminders, now=now, days=days)
