"""Error taxonomy shared by gateways, forms and the CLI.

- ValidationError: form input rejected before any network call
- AuthError: bad credentials, missing or expired token (401/403)
- NotFoundError: entity absent or owned by someone else (404)
- NetworkError: transport failure, nothing came back
- ApiError: any other non-success response
"""

from typing import Optional


class CrmError(Exception):
    """Base class for every failure surfaced to the user."""


class ValidationError(CrmError):
    """Field-level form errors, keyed by field name."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        summary = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(summary or "Invalid input")


class AuthError(CrmError):
    """Authentication or authorization failed."""

    def __init__(self, message: str = "Not authenticated", status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(CrmError):
    """Entity does not exist for the calling owner."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")


class NetworkError(CrmError):
    """Transport failure talking to the API."""


class ApiError(CrmError):
    """Unexpected HTTP status from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error {status_code}: {message}")
