"""Registries: index backends by name, transform callbacks per index."""

import threading
from dataclasses import dataclass

from recast.domain.index.model.subscription import Subscription, TransformCallback
from recast.domain.index.port.backend import StorageBackend


class IndexRegistry:
    """Registry of available index backends."""

    def __init__(self, backends: dict[str, StorageBackend]) -> None:
        self._backends = backends

    def get(self, name: str) -> StorageBackend | None:
        """Get a backend by name."""
        return self._backends.get(name)

    def names(self) -> list[str]:
        """List all available index names."""
        return list(self._backends.keys())


@dataclass(frozen=True)
class Registration:
    """A callback bound to its subscription, as stored in the registry."""

    subscription: Subscription
    callback: TransformCallback
    sequence: int


class TransformRegistry:
    """Ordered transform callbacks per index.

    The per-index lists are immutable tuples replaced wholesale under a lock
    (copy-on-write), so readers take a snapshot without locking and never
    observe a list that is being modified. Ordering is by priority, then by
    registration order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registrations: dict[str, tuple[Registration, ...]] = {}
        self._sequence = 0

    def add(
        self, index_name: str, callback: TransformCallback, priority: int = 0
    ) -> Subscription:
        """Register a callback for an index and return its subscription."""
        subscription = Subscription(index_name=index_name, priority=priority)
        with self._lock:
            self._sequence += 1
            entry = Registration(subscription, callback, self._sequence)
            current = self._registrations.get(index_name, ())
            self._registrations[index_name] = tuple(
                sorted(
                    (*current, entry),
                    key=lambda r: (r.subscription.priority, r.sequence),
                )
            )
        return subscription

    def remove(self, subscription: Subscription) -> bool:
        """Remove a subscription. Returns False if it was not registered."""
        with self._lock:
            current = self._registrations.get(subscription.index_name, ())
            remaining = tuple(r for r in current if r.subscription.id != subscription.id)
            if len(remaining) == len(current):
                return False
            if remaining:
                self._registrations[subscription.index_name] = remaining
            else:
                del self._registrations[subscription.index_name]
            return True

    def snapshot(self, index_name: str) -> tuple[Registration, ...]:
        """Registrations for an index, in invocation order."""
        return self._registrations.get(index_name, ())

    def index_names(self) -> list[str]:
        """Indexes that currently have at least one registration."""
        return list(self._registrations.keys())

    def __len__(self) -> int:
        return sum(len(r) for r in self._registrations.values())
