from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from sitecms.config import settings
from sitecms.database import get_db
from sitecms.store import EntityStore


class PaginationParams:
    """
    Reusable FastAPI dependency that parses ``page`` / ``limit`` query
    parameters.

    Out-of-range values are rejected with 422 here, before they reach
    ``pagination.normalize``; nothing is silently clamped.
    """

    def __init__(
        self,
        page: int = Query(
            1,
            ge=1,
            description="Page number (1-based).",
        ),
        limit: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            le=settings.MAX_PAGE_SIZE,
            description=f"Number of items per page (max {settings.MAX_PAGE_SIZE}).",
        ),
    ) -> None:
        self.page = page
        self.limit = limit


async def get_store(db: AsyncSession = Depends(get_db)) -> EntityStore:
    """A fresh ``EntityStore`` bound to the request's session."""
    return EntityStore(db)
