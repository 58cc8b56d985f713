from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from recast.config import Config
from recast.domain.index.port.content_store import ContentStore
from recast.infrastructure.content.sql import SqlContentStore
from recast.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from recast.util.di.base import Provider
from recast.util.di.scope import Scope


class PersistenceProvider(Provider):
    # Factories require method syntax
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_content_store(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> ContentStore:
        return SqlContentStore(session_factory)
