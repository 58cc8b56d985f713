"""Unit tests for TransformRegistry."""

import threading

from recast.domain.index.model.registry import TransformRegistry
from recast.domain.index.model.subscription import Subscription


def noop(record):
    return None


def other(record):
    return None


def callbacks(registry: TransformRegistry, index: str) -> list:
    return [r.callback for r in registry.snapshot(index)]


class TestTransformRegistry:
    def test_registration_order_is_kept(self):
        registry = TransformRegistry()

        registry.add("content", noop)
        registry.add("content", other)

        assert callbacks(registry, "content") == [noop, other]

    def test_lower_priority_runs_first(self):
        registry = TransformRegistry()

        registry.add("content", noop)
        registry.add("content", other, priority=-10)

        assert callbacks(registry, "content") == [other, noop]

    def test_equal_priority_appends(self):
        registry = TransformRegistry()

        registry.add("content", noop, priority=5)
        registry.add("content", other, priority=5)
        registry.add("content", noop, priority=5)

        assert callbacks(registry, "content") == [noop, other, noop]

    def test_indexes_are_independent(self):
        registry = TransformRegistry()

        registry.add("content", noop)
        registry.add("media", other)

        assert callbacks(registry, "content") == [noop]
        assert callbacks(registry, "media") == [other]
        assert sorted(registry.index_names()) == ["content", "media"]

    def test_duplicate_registration_is_allowed(self):
        registry = TransformRegistry()

        first = registry.add("content", noop)
        second = registry.add("content", noop)

        assert first != second
        assert len(registry) == 2

    def test_remove_only_removes_that_subscription(self):
        registry = TransformRegistry()
        first = registry.add("content", noop)
        registry.add("content", noop)

        assert registry.remove(first) is True

        assert len(registry) == 1

    def test_remove_twice_returns_false(self):
        registry = TransformRegistry()
        subscription = registry.add("content", noop)

        registry.remove(subscription)

        assert registry.remove(subscription) is False
        assert registry.snapshot("content") == ()

    def test_remove_unknown_subscription(self):
        registry = TransformRegistry()

        assert registry.remove(Subscription(index_name="nowhere")) is False

    def test_snapshot_is_unaffected_by_later_changes(self):
        """A snapshot taken before a removal still lists the removed callback."""
        registry = TransformRegistry()
        subscription = registry.add("content", noop)
        registry.add("content", other)

        snapshot = registry.snapshot("content")
        registry.remove(subscription)
        registry.add("content", noop)

        assert [r.callback for r in snapshot] == [noop, other]

    def test_concurrent_registration(self):
        """Registrations from many threads are all kept."""
        registry = TransformRegistry()

        def register_many():
            for _ in range(200):
                registry.add("content", noop)

        threads = [threading.Thread(target=register_many) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(registry) == 1600
        sequences = [r.sequence for r in registry.snapshot("content")]
        assert sequences == sorted(sequences)
