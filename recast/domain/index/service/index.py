"""IndexService - transforms records and persists them into index backends."""

import logging
from collections.abc import Iterable

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.model.registry import IndexRegistry
from recast.domain.index.service.transform import IndexingTransformStage
from recast.domain.shared.error import NotFoundError
from recast.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IndexService(Service):
    """Indexes records: every record passes the transform stage, then its backend.

    Can be called from any entry point (content save events, bulk rebuilds,
    CLI commands); it does not assume a request or transaction is active.
    """

    indexes: IndexRegistry
    stage: IndexingTransformStage

    async def index_record(self, index_name: str, record: IndexRecord) -> IndexRecord:
        """Transform a record and commit it to the named index.

        Args:
            index_name: Name of the target index.
            record: The record as built from the content item.

        Returns:
            The record as persisted.

        Raises:
            NotFoundError: If no backend is configured under ``index_name``.
            TransformError: If a transform fails; nothing is persisted.
        """
        backend = self.indexes.get(index_name)
        if backend is None:
            raise NotFoundError(
                f"Index '{index_name}' is not configured "
                f"(available: {', '.join(self.indexes.names()) or 'none'})"
            )

        final = await self.stage.process(index_name, record)
        await backend.ingest(final)
        logger.debug(f"Indexed {record.id} into '{index_name}'")
        return final

    async def index_records(
        self, index_name: str, records: Iterable[IndexRecord]
    ) -> list[IndexRecord]:
        """Index records one after another, stopping at the first failure."""
        return [await self.index_record(index_name, record) for record in records]

    async def get_count(self, index_name: str) -> int | None:
        """Get the document count for a specific backend.

        Returns:
            Document count, or None if backend not found.
        """
        backend = self.indexes.get(index_name)
        if backend is None:
            return None
        return await backend.count()

    async def check_health(self, index_name: str) -> bool | None:
        """Check health of a specific backend.

        Returns:
            True if healthy, False if unhealthy, None if backend not found.
        """
        backend = self.indexes.get(index_name)
        if backend is None:
            return None
        return await backend.health()
