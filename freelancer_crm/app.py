"""Application context: explicit container for config, session, theme and gateways.

Replaces module-level singletons. Create once at startup, pass it down.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .common.api import ApiClient
from .common.auth import SessionStore
from .common.storage import JSONFileStorage, StorageBackend
from .config import ServiceConfig
from .modules.auth import AuthService
from .modules.clients import ClientGateway
from .modules.dashboard import DashboardGateway
from .modules.projects import ProjectGateway
from .modules.reminders import ReminderGateway
from .modules.theme import ThemeContext

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Central container for shared app resources."""

    config: ServiceConfig
    storage: StorageBackend
    session: SessionStore
    theme: ThemeContext
    api: ApiClient
    auth: AuthService
    clients: ClientGateway
    projects: ProjectGateway
    reminders: ReminderGateway
    dashboard: DashboardGateway

    @classmethod
    def create(
        cls,
        config: ServiceConfig,
        storage: Optional[StorageBackend] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AppContext":
        """Build everything and read persisted session/theme (init)."""
        storage = storage if storage is not None else JSONFileStorage(config.storage.path)
        session = SessionStore(storage, key=config.storage.session_key)
        theme = ThemeContext(storage, key=config.storage.theme_key)
        # An expired token ends the session; the user has to log in again
        api = ApiClient(
            config.api, session, transport=transport, on_unauthorized=session.teardown
        )
        clients = ClientGateway(api)
        projects = ProjectGateway(api)
        reminders = ReminderGateway(api)
        ctx = cls(
            config=config,
            storage=storage,
            session=session,
            theme=theme,
            api=api,
            auth=AuthService(api, session),
            clients=clients,
            projects=projects,
            reminders=reminders,
            dashboard=DashboardGateway(api, clients, projects, reminders),
        )
        session.init()
        theme.init()
        logger.info(
            "AppContext initialized: api=%s authenticated=%s theme=%s",
            config.api.base_url, session.is_authenticated, theme.theme.value,
        )
        return ctx

    def teardown(self) -> None:
        """Logout: clear the session, keep the theme."""
        self.auth.logout()
