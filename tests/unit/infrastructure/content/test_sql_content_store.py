"""Unit tests for SqlContentStore against in-memory SQLite."""

import pytest
import pytest_asyncio

from recast.config import DatabaseConfig
from recast.domain.index.model.content import ContentNode
from recast.domain.shared.error import MissingScopeError
from recast.infrastructure.content.sql import SqlContentStore
from recast.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)

NODES = [
    ContentNode(id="1066", parent_id="-1", name="Home", path="-1,1066", level=1),
    ContentNode(id="1234", parent_id="1066", name="Blog", path="-1,1066,1234", level=2),
    ContentNode(id="1236", parent_id="1234", name="First post", path="-1,1066,1234,1236", level=3),
]


@pytest_asyncio.fixture
async def store():
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    await create_tables(engine)
    store = SqlContentStore(create_session_factory(engine))
    async with store.scope() as scope:
        for node in NODES:
            await scope.add(node)
    yield store
    await engine.dispose()


class TestSqlContentStore:
    @pytest.mark.asyncio
    async def test_ancestors_root_first(self, store):
        async with store.scope() as scope:
            chain = await scope.ancestors("1236")

        assert [n.name for n in chain] == ["Home", "Blog"]

    @pytest.mark.asyncio
    async def test_top_level_node_has_no_ancestors(self, store):
        async with store.scope() as scope:
            assert await scope.ancestors("1066") == []

    @pytest.mark.asyncio
    async def test_unknown_node(self, store):
        async with store.scope() as scope:
            assert await scope.get("9999") is None
            assert await scope.ancestors("9999") == []

    @pytest.mark.asyncio
    async def test_get(self, store):
        async with store.scope() as scope:
            node = await scope.get("1234")

        assert node == NODES[1]

    @pytest.mark.asyncio
    async def test_reads_after_scope_exit_fail(self, store):
        async with store.scope() as scope:
            pass

        with pytest.raises(MissingScopeError):
            await scope.ancestors("1236")

    @pytest.mark.asyncio
    async def test_scope_is_closed_when_body_raises(self, store):
        with pytest.raises(RuntimeError):
            async with store.scope() as scope:
                raise RuntimeError("boom")

        assert scope.active is False

    @pytest.mark.asyncio
    async def test_add_replaces_existing_node(self, store):
        renamed = NODES[1].model_copy(update={"name": "News"})
        async with store.scope() as scope:
            await scope.add(renamed)

        async with store.scope() as scope:
            chain = await scope.ancestors("1236")

        assert [n.name for n in chain] == ["Home", "News"]
