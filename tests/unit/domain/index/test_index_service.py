"""Unit tests for IndexService."""

from unittest.mock import AsyncMock

import pytest

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.model.registry import IndexRegistry
from recast.domain.index.service.index import IndexService
from recast.domain.index.service.transform import IndexingTransformStage
from recast.domain.index.transform import CombinedFieldTransform, SearchPathTransform
from recast.domain.shared.error import NotFoundError, TransformError


class FakeBackend:
    """Fake storage backend for testing."""

    def __init__(self, name: str, count: int = 0, healthy: bool = True):
        self._name = name
        self.ingest = AsyncMock()
        self.count = AsyncMock(return_value=count)
        self.health = AsyncMock(return_value=healthy)

    @property
    def name(self) -> str:
        return self._name


def make_service(backend: FakeBackend, stage: IndexingTransformStage | None = None):
    registry = IndexRegistry({backend.name: backend})
    return IndexService(indexes=registry, stage=stage or IndexingTransformStage())


def make_record(record_id: str = "1236") -> IndexRecord:
    return IndexRecord(
        id=record_id,
        category="content",
        fields={"title": ["First post"], "path": ["-1,1066,1234,1236"]},
    )


class TestIndexRecord:
    @pytest.mark.asyncio
    async def test_persists_transformed_record(self):
        # Arrange
        backend = FakeBackend("content")
        stage = IndexingTransformStage()
        stage.register("content", SearchPathTransform())
        stage.register("content", CombinedFieldTransform())
        service = make_service(backend, stage)

        # Act
        result = await service.index_record("content", make_record())

        # Assert
        backend.ingest.assert_awaited_once_with(result)
        assert result.fields["searchPath"] == ["-1 1066 1234 1236"]
        assert result.fields["combinedField"] == [
            "First post\n-1,1066,1234,1236\n-1 1066 1234 1236"
        ]

    @pytest.mark.asyncio
    async def test_failing_transform_never_reaches_backend(self):
        # Arrange
        backend = FakeBackend("content")
        stage = IndexingTransformStage()

        def broken(record):
            raise RuntimeError("boom")

        stage.register("content", broken)
        service = make_service(backend, stage)

        # Act / Assert
        with pytest.raises(TransformError):
            await service.index_record("content", make_record())

        backend.ingest.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_index_raises(self):
        service = make_service(FakeBackend("content"))

        with pytest.raises(NotFoundError, match=r"\(available: content\)"):
            await service.index_record("media", make_record())

    @pytest.mark.asyncio
    async def test_index_records_stops_at_first_failure(self):
        backend = FakeBackend("content")
        stage = IndexingTransformStage()

        def fails_on_second(record):
            if record.id == "2":
                raise ValueError("bad record")

        stage.register("content", fails_on_second)
        service = make_service(backend, stage)

        with pytest.raises(TransformError):
            await service.index_records(
                "content", [make_record("1"), make_record("2"), make_record("3")]
            )

        assert backend.ingest.await_count == 1


class TestIndexServiceQueries:
    @pytest.mark.asyncio
    async def test_get_count_returns_backend_count(self):
        backend = FakeBackend("content", count=42)
        service = make_service(backend)

        assert await service.get_count("content") == 42
        backend.count.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_count_returns_none_for_unknown_backend(self):
        service = make_service(FakeBackend("content"))

        assert await service.get_count("unknown") is None

    @pytest.mark.asyncio
    async def test_check_health_returns_backend_health(self):
        backend = FakeBackend("content", healthy=False)
        service = make_service(backend)

        assert await service.check_health("content") is False

    @pytest.mark.asyncio
    async def test_check_health_returns_none_for_unknown_backend(self):
        service = make_service(FakeBackend("content"))

        assert await service.check_health("unknown") is None
