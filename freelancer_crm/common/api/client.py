"""HTTP client for the CRM REST API.

Handles:
- Bearer credential from the session store on every call
- Mapping transport/HTTP failures onto the CRM error taxonomy
- No retries: a failed call fails the whole user action
"""

import logging
from typing import Any, Callable, Optional

import httpx

from ..auth import SessionStore
from ..errors import ApiError, AuthError, NetworkError, NotFoundError
from ...config import ApiConfig

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin async wrapper over httpx for the CRM API."""

    def __init__(
        self,
        config: ApiConfig,
        session: SessionStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        self.config = config
        self.session = session
        self.transport = transport
        self.on_unauthorized = on_unauthorized

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
        authenticated: bool = True,
    ) -> Any:
        """Send one request and return the decoded JSON body (None if empty)."""
        headers = {"Accept": "application/json"}
        if authenticated:
            headers["Authorization"] = f"Bearer {self.session.require_token()}"

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.config.timeout,
                transport=self.transport,
            ) as client:
                resp = await client.request(
                    method, path, json=json, params=params, headers=headers
                )
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise NetworkError(f"Could not reach {self.base_url}: {e}") from e

        self._raise_for_status(resp, method, path, authenticated)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"{method} {path} -> {resp.status_code}: body is not JSON")
            raise ApiError(resp.status_code, "Invalid JSON response") from e

    def _raise_for_status(
        self, resp: httpx.Response, method: str, path: str, authenticated: bool
    ) -> None:
        if resp.is_success:
            return
        message = _error_message(resp)
        logger.error(f"{method} {path} -> {resp.status_code}: {message}")

        if resp.status_code in (401, 403):
            if authenticated and resp.status_code == 401 and self.on_unauthorized:
                self.on_unauthorized()
            raise AuthError(message, status_code=resp.status_code)
        if resp.status_code == 404:
            raise NotFoundError("resource", path)
        raise ApiError(resp.status_code, message)

    async def get(self, path: str, params: Optional[dict] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Optional[dict] = None, authenticated: bool = True) -> Any:
        return await self.request("POST", path, json=json, authenticated=authenticated)

    async def patch(self, path: str, json: Optional[dict] = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)


def _error_message(resp: httpx.Response) -> str:
    """Pull {'error': ...} / {'message': ...} out of an error body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200] or resp.reason_phrase
    if isinstance(body, dict):
        for key in ("error", "message", "detail"):
            if body.get(key):
                return str(body[key])
    return resp.text[:200] or resp.reason_phrase
