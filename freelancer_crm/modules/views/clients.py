"""Client list search."""

from typing import Iterable, Optional

from ...common.models import Client
from .lookup import contains, normalize_query


def search_clients(clients: Iterable[Client], query: Optional[str]) -> list[Client]:
    """Match name, email or company, case-insensitive."""
    q = normalize_query(query)
    if not q:
        return list(clients)
    return [
        c for c in clients
        if contains(c.name, q) or contains(c.email, q) or contains(c.company, q)
    ]
