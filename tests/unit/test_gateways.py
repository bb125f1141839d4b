"""Tests for the entity gateways against a mocked CRM API.

Test groups:
- TestClientGateway: generic CRUD, owner scoping, not-found outcomes
- TestProjectGateway: per-client listing
- TestReminderGateway: upcoming/by-client/by-project listings, toggle
"""

import pytest

from freelancer_crm.common.errors import ApiError, AuthError, NotFoundError
from freelancer_crm.common.models import ClientDraft, ProjectDraft, ReminderDraft
from freelancer_crm.modules.clients import ClientGateway
from freelancer_crm.modules.projects import ProjectGateway
from freelancer_crm.modules.reminders import ReminderGateway
from tests.fixtures.crm import (
    OTHER_OWNER_ID,
    OWNER_ID,
    client_json,
    project_json,
    reminder_json,
)


@pytest.fixture
def clients(api):
    return ClientGateway(api)


@pytest.fixture
def projects(api):
    return ProjectGateway(api)


@pytest.fixture
def reminders(api):
    return ReminderGateway(api)


# ═══════════════════════════════════════════════════════════════════════════
#  Clients (generic CRUD)
# ═══════════════════════════════════════════════════════════════════════════

class TestClientGateway:
    @pytest.mark.asyncio
    async def test_list_all_scoped_to_owner(self, clients, mock_api):
        mock_api.route("GET", "/clients", [
            client_json(id="c1"),
            client_json(id="c2", user_id=OTHER_OWNER_ID),
        ])
        result = await clients.list_all(OWNER_ID)
        assert [c.id for c in result] == ["c1"]

    @pytest.mark.asyncio
    async def test_get_by_id(self, clients, mock_api):
        mock_api.route("GET", "/clients/c1", client_json(id="c1", name="Acme Corp"))
        client = await clients.get_by_id("c1", OWNER_ID)
        assert client.name == "Acme Corp"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, clients):
        with pytest.raises(NotFoundError) as exc:
            await clients.get_by_id("nope", OWNER_ID)
        assert str(exc.value) == "Client not found: nope"

    @pytest.mark.asyncio
    async def test_get_by_id_other_owner_is_not_found(self, clients, mock_api):
        mock_api.route("GET", "/clients/c1", client_json(id="c1", user_id=OTHER_OWNER_ID))
        with pytest.raises(NotFoundError):
            await clients.get_by_id("c1", OWNER_ID)

    @pytest.mark.asyncio
    async def test_create_stamps_owner(self, clients, mock_api):
        mock_api.route("POST", "/clients", client_json(id="new", name="Newco"))
        draft = ClientDraft(name="Newco", email="hi@newco.com", phone="1")
        client = await clients.create(draft, owner_id=OWNER_ID)
        assert client.id == "new"
        body = mock_api.last_json()
        assert body["userId"] == OWNER_ID
        assert body["name"] == "Newco"

    @pytest.mark.asyncio
    async def test_update_uses_patch(self, clients, mock_api):
        mock_api.route("PATCH", "/clients/c1", client_json(id="c1", name="Renamed"))
        draft = ClientDraft(name="Renamed", email="a@b.co", phone="1")
        client = await clients.update("c1", OWNER_ID, draft)
        assert client.name == "Renamed"
        assert mock_api.last.method == "PATCH"

    @pytest.mark.asyncio
    async def test_update_missing(self, clients):
        draft = ClientDraft(name="X", email="a@b.co", phone="1")
        with pytest.raises(NotFoundError):
            await clients.update("nope", OWNER_ID, draft)

    @pytest.mark.asyncio
    async def test_delete(self, clients, mock_api):
        mock_api.route("GET", "/clients/c1", client_json(id="c1"))
        mock_api.route("DELETE", "/clients/c1", {"success": True})
        assert await clients.delete("c1", OWNER_ID) is True
        assert mock_api.last.method == "DELETE"

    @pytest.mark.asyncio
    async def test_delete_missing_is_not_found_outcome(self, clients, mock_api):
        assert await clients.delete("ghost", OWNER_ID) is False
        assert [r.method for r in mock_api.requests] == ["GET"]

    @pytest.mark.asyncio
    async def test_delete_gone_between_read_and_delete(self, clients, mock_api):
        mock_api.route("GET", "/clients/c1", client_json(id="c1"))
        assert await clients.delete("c1", OWNER_ID) is False
        assert mock_api.last.method == "DELETE"

    @pytest.mark.asyncio
    async def test_delete_other_owner_never_sent(self, clients, mock_api):
        mock_api.route("GET", "/clients/c1", client_json(id="c1", user_id=OTHER_OWNER_ID))
        mock_api.route("DELETE", "/clients/c1", {"success": True})
        assert await clients.delete("c1", OWNER_ID) is False
        assert "DELETE" not in [r.method for r in mock_api.requests]

    @pytest.mark.asyncio
    async def test_records_without_owner_are_kept(self, clients, mock_api):
        unscoped = client_json(id="c0")
        del unscoped["userId"]
        mock_api.route("GET", "/clients", [
            unscoped,
            client_json(id="c1"),
            client_json(id="c2", user_id=OTHER_OWNER_ID),
        ])
        result = await clients.list_all(OWNER_ID)
        assert [c.id for c in result] == ["c0", "c1"]
        assert result[0].user_id is None

    @pytest.mark.asyncio
    async def test_malformed_record_is_api_error(self, reminders, mock_api):
        broken = reminder_json(id="r2")
        del broken["dueDate"]
        mock_api.route("GET", "/reminders", [reminder_json(id="r1"), broken])
        with pytest.raises(ApiError) as exc:
            await reminders.list_all(OWNER_ID)
        assert "reminder" in exc.value.message

    @pytest.mark.asyncio
    async def test_non_list_body_is_api_error(self, clients, mock_api):
        mock_api.route("GET", "/clients", {"clients": []})
        with pytest.raises(ApiError):
            await clients.list_all(OWNER_ID)

    @pytest.mark.asyncio
    async def test_auth_error_propagates(self, clients, mock_api):
        mock_api.route("GET", "/clients", {"error": "Unauthorized"}, status=401)
        with pytest.raises(AuthError):
            await clients.list_all(OWNER_ID)


# ═══════════════════════════════════════════════════════════════════════════
#  Projects
# ═══════════════════════════════════════════════════════════════════════════

class TestProjectGateway:
    @pytest.mark.asyncio
    async def test_list_by_client(self, projects, mock_api):
        mock_api.route("GET", "/projects/client/c1", [
            project_json(id="p1", client_id="c1"),
            project_json(id="p2", client_id="c1", user_id=OTHER_OWNER_ID),
        ])
        result = await projects.list_by_client("c1", OWNER_ID)
        assert [p.id for p in result] == ["p1"]

    @pytest.mark.asyncio
    async def test_create_payload(self, projects, mock_api):
        mock_api.route("POST", "/projects", project_json(id="p9", status="PLANNED"))
        draft = ProjectDraft(client_id="c1", title="Site", deadline="2024-03-01", budget=10)
        project = await projects.create(draft, owner_id=OWNER_ID)
        assert project.id == "p9"
        body = mock_api.last_json()
        assert body["clientId"] == "c1"
        assert body["status"] == "PLANNED"


# ═══════════════════════════════════════════════════════════════════════════
#  Reminders
# ═══════════════════════════════════════════════════════════════════════════

class TestReminderGateway:
    @pytest.mark.asyncio
    async def test_list_upcoming(self, reminders, mock_api):
        mock_api.route("GET", "/reminders/upcoming", [reminder_json(id="r1")])
        assert [r.id for r in await reminders.list_upcoming(OWNER_ID)] == ["r1"]

    @pytest.mark.asyncio
    async def test_list_by_client(self, reminders, mock_api):
        mock_api.route("GET", "/reminders", [
            reminder_json(id="r1", client_id="c1"),
            reminder_json(id="r2", client_id="c2"),
        ])
        result = await reminders.list_by_client("c1", OWNER_ID)
        assert [r.id for r in result] == ["r1"]
        assert mock_api.last.url.params["clientId"] == "c1"
        assert mock_api.last.url.params["userId"] == OWNER_ID

    @pytest.mark.asyncio
    async def test_list_by_project(self, reminders, mock_api):
        mock_api.route("GET", "/projects/p1/reminders", [reminder_json(id="r1", project_id="p1")])
        assert [r.id for r in await reminders.list_by_project("p1", OWNER_ID)] == ["r1"]

    @pytest.mark.asyncio
    async def test_toggle_complete(self, reminders, mock_api):
        mock_api.route("POST", "/reminders/toggle/r1", reminder_json(id="r1", completed=True))
        reminder = await reminders.toggle_complete("r1", OWNER_ID)
        assert reminder.completed is True

    @pytest.mark.asyncio
    async def test_toggle_missing(self, reminders):
        with pytest.raises(NotFoundError) as exc:
            await reminders.toggle_complete("ghost", OWNER_ID)
        assert exc.value.entity == "reminder"

    @pytest.mark.asyncio
    async def test_create_unattached(self, reminders, mock_api):
        mock_api.route("POST", "/reminders", reminder_json(id="r5"))
        await reminders.create(ReminderDraft(title="Call", due_date="2024-02-10"), OWNER_ID)
        body = mock_api.last_json()
        assert body["clientId"] is None
        assert body["dueDate"].startswith("2024-02-10")
