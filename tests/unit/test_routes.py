"""Tests for navigable route building."""

import pytest

from freelancer_crm.modules import routes


class TestRoutes:
    def test_paths(self):
        assert routes.list_path("client") == "/clients"
        assert routes.detail_path("project", "p1") == "/projects/p1"
        assert routes.edit_path("reminder", "r1") == "/reminders/r1/edit"

    def test_create_with_preselect(self):
        assert routes.create_path("project", client_id="c1") == "/projects/new?clientId=c1"
        assert routes.create_path("reminder") == "/reminders/new"
        path = routes.create_path("reminder", client_id="c1", project_id="p1")
        assert path == "/reminders/new?clientId=c1&projectId=p1"

    def test_parse_preselect(self):
        assert routes.parse_preselect("/reminders/new?clientId=c1&projectId=p1") == {
            "client_id": "c1", "project_id": "p1",
        }
        assert routes.parse_preselect("projectId=p2") == {"client_id": None, "project_id": "p2"}
        assert routes.parse_preselect("/reminders/new") == {"client_id": None, "project_id": None}

    def test_unknown_entity(self):
        with pytest.raises(ValueError):
            routes.detail_path("invoice", "i1")
