"""Authentication against the CRM API."""

from .service import AuthService, session_from_response

__all__ = ["AuthService", "session_from_response"]
