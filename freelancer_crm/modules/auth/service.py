"""Login, signup and logout against /auth."""

import logging
from typing import Any

from ...common.api import ApiClient, parse_response
from ...common.auth import SessionStore
from ...common.errors import AuthError
from ...common.models import LoginCredentials, RegisterCredentials, Session, User

logger = logging.getLogger(__name__)


def session_from_response(data: Any) -> Session:
    """Build a Session from {user, token}, optionally wrapped in {"data": ...}."""
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]
    if not isinstance(data, dict):
        raise AuthError("Unexpected login response")

    token = data.get("token") or data.get("accessToken")
    if not token:
        raise AuthError("Login response carried no token")
    user_data = data.get("user")
    if not isinstance(user_data, dict):
        # Flat shape: user fields next to the token
        user_data = {k: v for k, v in data.items() if k not in ("token", "accessToken")}
    return Session(user=parse_response(User, user_data, "user"), token=token)


class AuthService:
    """Creates and destroys the session held by the SessionStore."""

    def __init__(self, api: ApiClient, session: SessionStore):
        self.api = api
        self.session = session

    async def login(self, credentials: LoginCredentials) -> Session:
        try:
            data = await self.api.post(
                "/auth/login", json=credentials.model_dump(), authenticated=False
            )
        except AuthError as e:
            raise AuthError("Invalid credentials", status_code=e.status_code) from e
        session = self.session.start(session_from_response(data))
        logger.info("Logged in successfully")
        return session

    async def register(self, credentials: RegisterCredentials) -> Session:
        data = await self.api.post(
            "/auth/signup", json=credentials.model_dump(), authenticated=False
        )
        session = self.session.start(session_from_response(data))
        logger.info("Account created successfully")
        return session

    def logout(self) -> None:
        self.session.teardown()
        logger.info("Logged out")
