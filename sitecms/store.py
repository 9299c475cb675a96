"""
Entity store: the only code that talks to the database session.

One ``EntityStore`` wraps one ``AsyncSession`` and is built per request
(see ``dependencies.get_store``), so nothing here is shared between
calls.  The store flushes but never commits; ``get_db`` owns the
transaction.  Each write runs in a SAVEPOINT, so a rejected write rolls
back alone and earlier uncommitted rows in the session survive it.

Failures are translated here:

- ``IntegrityError``  -> ``ConstraintViolation`` (duplicate slug)
- anything else from SQLAlchemy, or an undecodable stored value
  -> ``InternalStoreError``
"""
import logging

from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.exceptions import ConstraintViolation, InternalStoreError

logger = logging.getLogger(__name__)

# Assigned by the database; caller-supplied values are dropped.
SERVER_MANAGED_FIELDS: frozenset[str] = frozenset({"id", "created_at", "updated_at"})


def _table_of(model) -> str:
    return getattr(model, "__tablename__", type(model).__name__)


class EntityStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, model, values: dict):
        """Persist a new *model* row built from *values* and return it."""
        row = model(**{k: v for k, v in values.items() if k not in SERVER_MANAGED_FIELDS})
        await self._write(row, lambda: self.session.add(row))
        return row

    async def update(self, row, values: dict):
        """Apply *values* to an already-loaded *row* and return it refreshed."""

        def apply() -> None:
            for field, value in values.items():
                if field not in SERVER_MANAGED_FIELDS:
                    setattr(row, field, value)

        await self._write(row, apply)
        return row

    async def select_many(self, stmt: Select) -> list:
        try:
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except InternalStoreError:
            logger.exception("Corrupt row while reading: %s", stmt)
            raise
        except SQLAlchemyError as exc:
            logger.exception("Store read failed")
            raise InternalStoreError(str(exc)) from exc

    async def select_one(self, stmt: Select):
        rows = await self.select_many(stmt)
        return rows[0] if rows else None

    async def _write(self, row, apply) -> None:
        table = _table_of(row)
        try:
            # Changes are staged inside the savepoint; begin_nested() flushes
            # anything already pending before it starts.
            async with self.session.begin_nested():
                apply()
                await self.session.flush()
            # Pull server-side defaults (id, timestamps) back onto the row.
            await self.session.refresh(row)
        except IntegrityError as exc:
            logger.warning("Constraint violation on %s: %s", table, exc.orig)
            raise ConstraintViolation(table, str(exc.orig)) from exc
        except InternalStoreError:
            logger.exception("Corrupt row while writing to %s", table)
            raise
        except SQLAlchemyError as exc:
            logger.exception("Store write to %s failed", table)
            raise InternalStoreError(str(exc)) from exc
