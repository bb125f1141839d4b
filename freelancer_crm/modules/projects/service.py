"""Project gateway: CRUD on /projects plus the per-client listing."""

from ...common.api import EntityGateway
from ...common.models import Project, ProjectDraft


class ProjectGateway(EntityGateway[Project, ProjectDraft]):
    entity = "project"
    path = "/projects"
    model = Project

    async def list_by_client(self, client_id: str, owner_id: str) -> list[Project]:
        """Projects of one client (client detail page)."""
        data = await self.api.get(f"{self.path}/client/{client_id}")
        return self._parse_list(data, owner_id)
