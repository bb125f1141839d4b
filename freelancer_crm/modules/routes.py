"""Navigable routes: list/detail/create/edit paths per entity.

Create paths take optional clientId/projectId preselect parameters.
"""

from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit

DASHBOARD = "/"
LOGIN = "/login"
REGISTER = "/register"

_COLLECTIONS = {
    "client": "/clients",
    "project": "/projects",
    "reminder": "/reminders",
}


def _collection(entity: str) -> str:
    try:
        return _COLLECTIONS[entity]
    except KeyError:
        raise ValueError(f"Unknown entity type: {entity}") from None


def list_path(entity: str) -> str:
    return _collection(entity)


def detail_path(entity: str, entity_id: str) -> str:
    return f"{_collection(entity)}/{entity_id}"


def edit_path(entity: str, entity_id: str) -> str:
    return f"{_collection(entity)}/{entity_id}/edit"


def create_path(
    entity: str, client_id: Optional[str] = None, project_id: Optional[str] = None
) -> str:
    params = {}
    if client_id:
        params["clientId"] = client_id
    if project_id:
        params["projectId"] = project_id
    path = f"{_collection(entity)}/new"
    return f"{path}?{urlencode(params)}" if params else path


def parse_preselect(path_or_query: str) -> dict[str, Optional[str]]:
    """Read clientId/projectId back out of a create path or query string."""
    query = urlsplit(path_or_query).query if "?" in path_or_query else path_or_query
    params = parse_qs(query)
    return {
        "client_id": params.get("clientId", [None])[0] or None,
        "project_id": params.get("projectId", [None])[0] or None,
    }
