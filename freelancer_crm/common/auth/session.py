"""Session store: authenticated user + bearer token in local storage.

Lifecycle:
- init(): read the persisted session at startup
- start(): written at login/register
- teardown(): removed at logout (or when the API rejects the token)
"""
import logging
from typing import Optional

from ..errors import AuthError
from ..models import Session, User
from ..storage import StorageBackend

logger = logging.getLogger(__name__)

SESSION_KEY = "crm_user"


class SessionStore:
    """Holds the current session; every gateway call reads the token from here."""

    def __init__(self, storage: StorageBackend, key: str = SESSION_KEY):
        self.storage = storage
        self.key = key
        self._session: Optional[Session] = None

    def init(self) -> Optional[Session]:
        """Load the persisted session. Unreadable data is removed entirely."""
        raw = self.storage.get_item(self.key)
        if not raw:
            self._session = None
            return None
        try:
            self._session = Session.model_validate_json(raw)
        except ValueError as e:
            logger.warning(f"Discarding unreadable session: {e}")
            self.storage.remove_item(self.key)
            self._session = None
        return self._session

    def start(self, session: Session) -> Session:
        self._session = session
        self.storage.set_item(self.key, session.model_dump_json(by_alias=True))
        logger.info(f"Session started for {session.user.email or session.user.id}")
        return session

    def teardown(self) -> None:
        self._session = None
        self.storage.remove_item(self.key)

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def user(self) -> Optional[User]:
        return self._session.user if self._session else None

    @property
    def token(self) -> Optional[str]:
        return self._session.token if self._session else None

    def require_token(self) -> str:
        if not self._session or not self._session.token:
            raise AuthError("Not logged in")
        return self._session.token

    def require_user(self) -> User:
        if not self._session:
            raise AuthError("Not logged in")
        return self._session.user
