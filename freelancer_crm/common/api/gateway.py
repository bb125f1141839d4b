"""Generic CRUD gateway over one REST collection."""

import logging
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from ..errors import ApiError, NotFoundError
from .client import ApiClient

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)
D = TypeVar("D", bound=BaseModel)


def parse_response(model: type, data: Any, what: str) -> Any:
    """Validate a response body; a body the model rejects is an ApiError."""
    try:
        return model.model_validate(data)
    except ModelValidationError as e:
        logger.error(f"Malformed {what} in API response: {e.error_count()} error(s)")
        raise ApiError(200, f"Malformed {what} in response") from e


class EntityGateway(Generic[E, D]):
    """list_all / get_by_id / create / update / delete for one entity type.

    Subclasses set `entity` (for messages), `path` (collection URL) and
    `model` (the pydantic entity class). Records without a user id are not
    scoped client-side and belong to every owner.
    """

    entity: str = "entity"
    path: str = ""
    model: type

    def __init__(self, api: ApiClient):
        self.api = api

    def _item_path(self, entity_id: str) -> str:
        return f"{self.path}/{entity_id}"

    def _parse(self, data: Any) -> E:
        return parse_response(self.model, data, self.entity)

    @staticmethod
    def _owned_by(item: E, owner_id: Optional[str]) -> bool:
        return not owner_id or item.user_id is None or item.user_id == owner_id

    def _parse_list(self, data: Any, owner_id: Optional[str] = None) -> list[E]:
        if data is not None and not isinstance(data, list):
            raise ApiError(200, f"Expected a list of {self.entity} records")
        items = [self._parse(item) for item in (data or [])]
        return [item for item in items if self._owned_by(item, owner_id)]

    def _check_owner(self, item: E, entity_id: str, owner_id: str) -> E:
        if not self._owned_by(item, owner_id):
            raise NotFoundError(self.entity, entity_id)
        return item

    async def list_all(self, owner_id: str) -> list[E]:
        data = await self.api.get(self.path)
        return self._parse_list(data, owner_id)

    async def get_by_id(self, entity_id: str, owner_id: str) -> E:
        try:
            data = await self.api.get(self._item_path(entity_id))
        except NotFoundError as e:
            raise NotFoundError(self.entity, entity_id) from e
        if data is None:
            raise NotFoundError(self.entity, entity_id)
        return self._check_owner(self._parse(data), entity_id, owner_id)

    async def create(self, draft: D, owner_id: Optional[str] = None) -> E:
        """Create from a draft; owner_id, when given, is stamped into it."""
        if owner_id is not None:
            draft = draft.model_copy(update={"user_id": owner_id})
        data = await self.api.post(self.path, json=draft.to_payload())
        item = self._parse(data)
        logger.info(f"Created {self.entity} {item.id}")
        return item

    async def update(self, entity_id: str, owner_id: str, draft: D) -> E:
        try:
            data = await self.api.patch(self._item_path(entity_id), json=draft.to_payload())
        except NotFoundError as e:
            raise NotFoundError(self.entity, entity_id) from e
        item = self._check_owner(self._parse(data), entity_id, owner_id)
        logger.info(f"Updated {self.entity} {entity_id}")
        return item

    async def delete(self, entity_id: str, owner_id: str) -> bool:
        """Delete; False when the entity does not exist for this owner.

        Ownership is checked with a read first, so another owner's entity is
        never deleted.
        """
        try:
            await self.get_by_id(entity_id, owner_id)
            await self.api.delete(self._item_path(entity_id))
        except NotFoundError:
            logger.warning(f"Delete skipped, {self.entity} {entity_id} not found for {owner_id}")
            return False
        logger.info(f"Deleted {self.entity} {entity_id}")
        return True
