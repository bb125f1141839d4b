"""Id lookups and text matching shared by the list views."""

from typing import Iterable, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

Index = Union[Mapping[str, T], Iterable[T], None]


def index_by_id(entities: Iterable[T]) -> dict[str, T]:
    """id -> entity, later duplicates win."""
    return {e.id: e for e in entities}


def as_index(entities: Index) -> Mapping:
    if entities is None:
        return {}
    if isinstance(entities, Mapping):
        return entities
    return index_by_id(entities)


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def contains(text: Optional[str], query: str) -> bool:
    """Case-insensitive substring test; query must already be lower-cased."""
    return bool(text) and query in text.lower()
