"""
Generic content repository.

One ``ContentRepository`` binds an ``EntityStore`` to an
``EntityDescriptor``.  Every content kind shares the same create / list /
slug-lookup contract, so the per-kind handlers in
``services.content_service`` are one-liners over this class.
"""
from collections.abc import Mapping

from pydantic import BaseModel

from sitecms import money
from sitecms.entities import EntityDescriptor
from sitecms.pagination import normalize
from sitecms.queries import id_query, list_query, slug_query
from sitecms.store import EntityStore


def _as_dict(data) -> dict:
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, Mapping):
        return dict(data)
    raise TypeError(f"Expected a pydantic model or mapping, got {type(data).__name__}")


class ContentRepository:
    def __init__(self, store: EntityStore, descriptor: EntityDescriptor) -> None:
        self.store = store
        self.descriptor = descriptor

    def _encode_money(self, values: dict) -> dict:
        for field in self.descriptor.money_fields:
            if field in values:
                values[field] = money.to_decimal(values[field])
        return values

    async def create(self, data):
        """
        Insert a new row from *data* (schema instance or mapping).

        Raises ``ConstraintViolation`` on a duplicate slug and
        ``PrecisionError`` for a price with more than two decimals.
        """
        values = self._encode_money(_as_dict(data))
        if self.descriptor.on_create is not None:
            values = self.descriptor.on_create(values)
        return await self.store.insert(self.descriptor.model, values)

    async def list(self, page: int | None = None, limit: int | None = None) -> list:
        """Visible rows for one page, in the kind's ordering."""
        return await self.store.select_many(list_query(self.descriptor, normalize(page, limit)))

    async def get_by_slug(self, slug: str):
        """Visible row with *slug*, or None."""
        return await self.store.select_one(slug_query(self.descriptor, slug))

    async def get(self, entity_id: int):
        return await self.store.select_one(id_query(self.descriptor, entity_id))

    async def update(self, entity_id: int, changes):
        """
        Apply a partial update and return the refreshed row.

        Only keys present in *changes* are written; for a pydantic model
        that means fields the caller explicitly set.  Returns None when
        *entity_id* does not exist.
        """
        if isinstance(changes, BaseModel):
            changes = changes.model_dump(exclude_unset=True)
        row = await self.get(entity_id)
        if row is None:
            return None
        values = self._encode_money(dict(changes))
        values.pop("id", None)
        return await self.store.update(row, values)
