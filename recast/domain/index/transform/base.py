"""Shared pieces for transform callbacks."""

import functools
import inspect
import logging
from collections.abc import Iterable

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.model.subscription import (
    TransformCallback,
    TransformResult,
    callback_name,
)

logger = logging.getLogger(__name__)


class RecordSelector:
    """Matches records by category and, optionally, item type.

    An empty ``categories`` matches every category; an empty ``item_types``
    matches every item type.
    """

    def __init__(self, categories: Iterable[str] = (), item_types: Iterable[str] = ()) -> None:
        self.categories = frozenset(categories)
        self.item_types = frozenset(item_types)

    def matches(self, record: IndexRecord) -> bool:
        if self.categories and record.category not in self.categories:
            return False
        if self.item_types and record.item_type not in self.item_types:
            return False
        return True

    def __repr__(self) -> str:
        return f"RecordSelector(categories={sorted(self.categories)}, item_types={sorted(self.item_types)})"


def fail_open(callback: TransformCallback) -> TransformCallback:
    """Wrap a callback so its errors are logged and the record passes through.

    The stage itself is fail-closed; this is how a single transform opts out.
    """
    name = callback_name(callback)

    @functools.wraps(callback)
    async def wrapper(record: IndexRecord) -> TransformResult:
        try:
            result = callback(record)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            logger.warning(f"Transform {name} failed for {record.id}, skipping its changes: {e}")
            return None

    return wrapper
