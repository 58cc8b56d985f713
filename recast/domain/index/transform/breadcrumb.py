"""Breadcrumb - ancestor names resolved from the content store."""

import logging
from collections.abc import Iterable

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.port.content_store import ContentStore
from recast.domain.index.transform.base import RecordSelector

logger = logging.getLogger(__name__)

BREADCRUMB_FIELD = "breadcrumb"


class BreadcrumbTransform:
    """Adds the names and ids of a record's ancestors, root first.

    Writes ``<target_field>`` with ancestor names and ``<target_field>Ids``
    with ancestor ids. Indexing runs outside any request, so the lookup
    opens its own content-store scope for every record; the store raises
    MissingScopeError when no scope can be had.
    """

    def __init__(
        self,
        content_store: ContentStore,
        categories: Iterable[str] = (),
        item_types: Iterable[str] = (),
        target_field: str = BREADCRUMB_FIELD,
        include_self: bool = False,
    ) -> None:
        self.content_store = content_store
        self.selector = RecordSelector(categories, item_types)
        self.target_field = target_field
        self.include_self = include_self

    async def __call__(self, record: IndexRecord) -> IndexRecord | None:
        if not self.selector.matches(record):
            return None

        async with self.content_store.scope() as scope:
            chain = await scope.ancestors(record.id)
            if self.include_self:
                node = await scope.get(record.id)
                if node is not None:
                    chain = [*chain, node]

        if not chain:
            logger.debug(f"No ancestors found for {record.id}")

        fields = record.clone_fields()
        fields[self.target_field] = [node.name for node in chain]
        fields[f"{self.target_field}Ids"] = [node.id for node in chain]
        return record.with_fields(fields)
