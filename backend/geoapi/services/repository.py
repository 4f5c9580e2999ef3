"""Shared plumbing for the read-only entity repositories."""
import logging
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy import Select, exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from geoapi.exceptions import StoreUnavailable
from geoapi.schemas.pagination import CursorPage, CursorPaginationParams
from geoapi.services.cursor import build_cursor_page
from geoapi.services.spatial_query import paginate

logger = logging.getLogger(__name__)

E = TypeVar("E")

# Connectivity and deadline failures; anything else (bad SQL, constraint
# errors) propagates untouched.
_UNAVAILABLE_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,
    OSError,
    TimeoutError,
)


class ReadRepository(Generic[E]):
    """Runs one statement per call on a session from the shared pool."""

    def __init__(
        self,
        sessionmaker: async_sessionmaker[AsyncSession],
        to_entity: Callable[[Any], E],
    ):
        self._sessionmaker = sessionmaker
        self._to_entity = to_entity

    async def _fetch(self, stmt: Select) -> list[E]:
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(stmt)
                records = result.scalars().all()
        except _UNAVAILABLE_ERRORS as e:
            logger.warning(f"Spatial store unavailable: {e}")
            raise StoreUnavailable(str(e)) from e
        except sa_exc.DBAPIError as e:
            if e.connection_invalidated:
                logger.warning(f"Spatial store connection lost: {e}")
                raise StoreUnavailable(str(e)) from e
            raise

        # A single undecodable row fails the whole call.
        return [self._to_entity(record) for record in records]

    async def _fetch_one(self, stmt: Select) -> E | None:
        entities = await self._fetch(stmt.limit(1))
        return entities[0] if entities else None

    async def _fetch_page(
        self,
        stmt: Select,
        id_column,
        params: CursorPaginationParams,
        *order_by,
    ) -> CursorPage:
        entities = await self._fetch(paginate(stmt, id_column, params, *order_by))
        return build_cursor_page(entities, params.limit)
