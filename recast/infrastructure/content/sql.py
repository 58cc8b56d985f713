"""SQL implementation of the ContentStore port."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from recast.domain.index.model.content import ContentNode
from recast.domain.shared.error import MissingScopeError
from recast.infrastructure.persistence.tables import content_nodes_table

logger = logging.getLogger(__name__)


def row_to_node(row: dict[str, Any]) -> ContentNode:
    return ContentNode(
        id=row["id"],
        parent_id=row["parent_id"],
        name=row["name"],
        path=row["path"],
        level=row["level"],
    )


class SqlContentScope:
    """Reads against one session; unusable once its scope has exited."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.active = True

    def _require_active(self) -> None:
        if not self.active:
            raise MissingScopeError("Content-store scope is closed")

    async def get(self, node_id: str) -> ContentNode | None:
        self._require_active()
        stmt = select(content_nodes_table).where(content_nodes_table.c.id == node_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_node(dict(row)) if row else None

    async def ancestors(self, node_id: str) -> list[ContentNode]:
        """Ancestors root first, resolved from the node's stored path."""
        node = await self.get(node_id)
        if node is None:
            return []

        ids = node.ancestor_ids()
        if not ids:
            return []

        stmt = select(content_nodes_table).where(content_nodes_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        by_id = {row["id"]: row_to_node(dict(row)) for row in result.mappings()}
        # Missing ancestors are skipped rather than failing the whole chain
        return [by_id[i] for i in ids if i in by_id]

    async def add(self, node: ContentNode) -> None:
        """Insert or replace a node. Used to seed the store."""
        self._require_active()
        await self.session.execute(
            content_nodes_table.delete().where(content_nodes_table.c.id == node.id)
        )
        await self.session.execute(content_nodes_table.insert().values(**node.model_dump()))
        await self.session.flush()


class SqlContentStore:
    """ContentStore backed by the content_nodes table.

    Every scope is its own session with its own connection, opened when
    the scope is entered and closed when it exits, whatever the outcome.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def scope(self) -> AsyncIterator[SqlContentScope]:
        session = self._session_factory()
        try:
            # Acquire the connection up front so an unreachable store fails here
            await session.connection()
        except SQLAlchemyError as e:
            await session.close()
            raise MissingScopeError(f"Could not open content-store scope: {e}") from e

        scope = SqlContentScope(session)
        try:
            yield scope
            await session.commit()
        except BaseException:
            await session.rollback()
            raise
        finally:
            scope.active = False
            await session.close()
