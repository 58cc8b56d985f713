"""StorageBackend protocol for pluggable index backends."""

from typing import TYPE_CHECKING, Protocol

from recast.domain.index.model.result import QueryResult

if TYPE_CHECKING:
    from recast.domain.index.model.record import IndexRecord


class StorageBackend(Protocol):
    """Protocol for the persisting side of an index.

    The backend receives records only after every registered transform
    has run.
    """

    @property
    def name(self) -> str:
        """Unique name for this index instance."""
        ...

    async def ingest(self, record: "IndexRecord") -> None:
        """Store a record in the index, replacing any previous version."""
        ...

    async def delete(self, record_id: str) -> None:
        """Remove a record from the index."""
        ...

    async def query(self, q: str, limit: int = 20, field: str | None = None) -> QueryResult:
        """Execute a query and return structured results.

        Args:
            q: The query string.
            limit: Maximum number of results to return.
            field: Restrict matching to a single field.
        """
        ...

    async def health(self) -> bool:
        """Check if the backend is operational."""
        ...

    async def count(self) -> int:
        """Return the number of documents in the index."""
        ...
