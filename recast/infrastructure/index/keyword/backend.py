"""Keyword storage backend - whole-token matching over an in-memory store."""

import logging
import threading
from typing import Any

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.model.result import QueryResult, SearchHit
from recast.infrastructure.index.keyword.config import KeywordBackendConfig

logger = logging.getLogger(__name__)


class KeywordStorageBackend:
    """Stores transformed records and matches queries by whole tokens.

    Values are split on whitespace. A record matches when every query token
    appears in the searched field (or in any configured field). Scoring is
    the fraction of the record's tokens that matched, so narrower records
    rank first. No stemming or ranking beyond that.

    Writes hold a threading lock, so one backend can be shared by workers
    running their own event loops on separate threads.
    """

    def __init__(self, name: str, config: KeywordBackendConfig | None = None) -> None:
        self._name = name
        self._config = config or KeywordBackendConfig()
        self._records: dict[str, IndexRecord] = {}
        self._tokens: dict[str, dict[str, set[str]]] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    async def ingest(self, record: IndexRecord) -> None:
        """Store a record, replacing any previous version with the same id."""
        with self._lock:
            self._records[record.id] = record
            self._tokens[record.id] = {
                field: self._tokenize_values(values) for field, values in record.fields.items()
            }
        logger.debug(f"Stored {record.id} in keyword index '{self._name}'")

    async def delete(self, record_id: str) -> None:
        """Remove a record from the index."""
        with self._lock:
            self._records.pop(record_id, None)
            self._tokens.pop(record_id, None)

    async def get(self, record_id: str) -> IndexRecord | None:
        """Return the stored version of a record."""
        return self._records.get(record_id)

    async def query(self, q: str, limit: int = 20, field: str | None = None) -> QueryResult:
        """Execute a query and return structured results."""
        wanted = set(self._split(q))
        if not wanted:
            return QueryResult(hits=[], total=0, query=q)

        with self._lock:
            entries = [(self._records[i], by_field) for i, by_field in self._tokens.items()]

        hits: list[SearchHit] = []
        for record, by_field in entries:
            tokens = self._searchable(by_field, field)
            if wanted <= tokens:
                hits.append(
                    SearchHit(
                        id=record.id,
                        score=len(wanted) / len(tokens),
                        fields=record.clone_fields(),
                    )
                )

        hits.sort(key=lambda h: (-h.score, h.id))
        return QueryResult(hits=hits[:limit], total=len(hits), query=q)

    async def health(self) -> bool:
        """Check if the backend is operational."""
        return True

    async def count(self) -> int:
        """Return the number of documents in the index."""
        return len(self._records)

    def _searchable(self, by_field: dict[str, set[str]], field: str | None) -> set[str]:
        if field is not None:
            return by_field.get(field, set())
        names = self._config.fields or list(by_field)
        tokens: set[str] = set()
        for name in names:
            tokens |= by_field.get(name, set())
        return tokens

    def _tokenize_values(self, values: list[Any]) -> set[str]:
        tokens: set[str] = set()
        for value in values:
            if value is not None:
                tokens.update(self._split(str(value)))
        return tokens

    def _split(self, text: str) -> list[str]:
        if self._config.lowercase:
            text = text.lower()
        return text.split()
