from dishka import AsyncContainer, from_context, make_async_container

from recast.config import Config
from recast.domain.index.util.di.provider import IndexDomainProvider
from recast.infrastructure.index.di import IndexProvider
from recast.infrastructure.persistence.di import PersistenceProvider
from recast.util.di.base import Provider
from recast.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars and RECAST_CONFIG_FILE at runtime
    config = config or Config()

    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        IndexProvider(),
        IndexDomainProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
