"""
Freelancer CRM Test Configuration

Shared fixtures for all tests.
"""
import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from freelancer_crm.common.api import ApiClient
from freelancer_crm.common.auth import SessionStore
from freelancer_crm.common.storage import MemoryStorage
from freelancer_crm.config import ApiConfig
from tests.fixtures.crm import (
    BASE_URL,
    NOW,
    make_client,
    make_project,
    make_reminder,
    make_session,
)


# =============================================================================
# FIXTURES: Sample Data
# =============================================================================

@pytest.fixture
def now():
    """Pinned clock for time-dependent views."""
    return NOW


@pytest.fixture
def sample_clients():
    return [
        make_client(id="c1", name="Acme Corp"),
        make_client(id="c2", name="Globex", company="Globex Industries"),
        make_client(id="c3", name="Initech", company=None),
    ]


@pytest.fixture
def sample_projects():
    return [
        make_project(id="p1", client_id="c1", title="Website", status="IN_PROGRESS"),
        make_project(id="p2", client_id="c1", title="Mobile App", status="PLANNED"),
        make_project(id="p3", client_id="c2", title="Data Migration", status="IN_PROGRESS"),
        make_project(id="p4", client_id="c3", title="Audit", status="COMPLETED"),
    ]


# =============================================================================
# FIXTURES: Session & Storage
# =============================================================================

@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def session_store(storage):
    """Session store with a logged-in user."""
    store = SessionStore(storage)
    store.start(make_session())
    return store


# =============================================================================
# FIXTURES: CRM API Mock
# =============================================================================

Route = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


class MockApi:
    """Route table on top of httpx.MockTransport.

    Routes are keyed by (method, path relative to the API base). A route is
    either a (status, json_body) tuple or a callable taking the request.
    Unrouted requests answer 404.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def route(self, method: str, path: str, body: Any = None, status: int = 200,
              handler: Optional[Callable] = None):
        self.routes[(method.upper(), path)] = handler or (status, body)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(httpx.URL(BASE_URL).path):]
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"error": "Not found"})
        if callable(route):
            return route(request)
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def mock_api():
    return MockApi()


@pytest.fixture
def api(mock_api, session_store):
    """ApiClient wired to the mock transport, logging out on 401."""
    return ApiClient(
        ApiConfig(base_url=BASE_URL, timeout=5),
        session_store,
        transport=mock_api.transport,
        on_unauthorized=session_store.teardown,
    )
