"""Dependency injection provider for index backends and the transform stage."""

import logging
from collections.abc import Iterable

from dishka import provide

from recast.config import Config
from recast.domain.index.model.registry import IndexRegistry
from recast.domain.index.model.subscription import Subscription
from recast.domain.index.port.backend import StorageBackend
from recast.domain.index.port.content_store import ContentStore
from recast.domain.index.service.transform import IndexingTransformStage
from recast.domain.index.transform.factory import build_transform
from recast.domain.shared.error import ConfigurationError
from recast.infrastructure.index.keyword.backend import KeywordStorageBackend
from recast.util.di.base import Provider
from recast.util.di.scope import Scope

logger = logging.getLogger(__name__)


class IndexProvider(Provider):
    """Provides configured index backends and the transform stage."""

    @provide(scope=Scope.APP)
    def get_backends(self, config: Config) -> IndexRegistry:
        """Build all configured index backends."""
        backends: dict[str, StorageBackend] = {}

        for name, idx_config in config.indexes.items():
            if idx_config.backend == "keyword":
                backends[name] = KeywordStorageBackend(name, idx_config.config)
            else:
                raise ConfigurationError(
                    f"Unknown backend '{idx_config.backend}' for index '{name}'"
                )

        return IndexRegistry(backends)

    @provide(scope=Scope.APP)
    def get_stage(
        self, config: Config, content_store: ContentStore
    ) -> Iterable[IndexingTransformStage]:
        """Register configured transforms; unregister them when the container closes."""
        stage = IndexingTransformStage()
        subscriptions: list[Subscription] = []

        for transform in config.transforms:
            if transform.index not in config.indexes:
                raise ConfigurationError(
                    f"Transform '{transform.kind}' targets unknown index '{transform.index}'"
                )
            callback = build_transform(transform, content_store)
            subscriptions.append(stage.register(transform.index, callback, transform.priority))

        logger.info(f"Registered {len(subscriptions)} transform(s)")
        yield stage

        for subscription in subscriptions:
            stage.unregister(subscription)
        logger.debug("Unregistered all configured transforms")
