"""Session handling for the CRM API."""

from .session import SESSION_KEY, SessionStore

__all__ = ['SESSION_KEY', 'SessionStore']
