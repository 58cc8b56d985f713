"""Transform callbacks and the handles returned when registering them."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import NewType
from uuid import UUID, uuid4

from recast.domain.index.model.record import IndexRecord

TransformResult = IndexRecord | None

TransformCallback = Callable[[IndexRecord], TransformResult | Awaitable[TransformResult]]
"""Rewrites a record's fields before commit. Returning None passes the record through."""

SubscriptionId = NewType("SubscriptionId", UUID)


@dataclass(frozen=True)
class Subscription:
    """Handle for a registered transform callback.

    The stage only holds the callback through its subscription; the
    registering code owns the callback and removes it via ``unregister``.
    """

    index_name: str
    priority: int = 0
    id: SubscriptionId = field(default_factory=lambda: SubscriptionId(uuid4()))


def callback_name(callback: TransformCallback) -> str:
    """Human-readable name of a callback for logs and errors."""
    name = getattr(callback, "__qualname__", None)
    if name is None:
        name = type(callback).__qualname__
    return name
