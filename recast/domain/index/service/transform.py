"""IndexingTransformStage - runs registered transforms on records before commit."""

import inspect
import logging
from dataclasses import field

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.model.registry import TransformRegistry
from recast.domain.index.model.subscription import (
    Subscription,
    TransformCallback,
    callback_name,
)
from recast.domain.shared.error import TransformError
from recast.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IndexingTransformStage(Service):
    """Extension point invoked once per record, per index, before indexing.

    Callbacks registered for an index run sequentially in priority and
    registration order. Each one receives the record returned by the
    previous one, so later callbacks observe earlier changes and never
    the other way round.

    Callbacks decide for themselves whether a record concerns them
    (typically by ``record.category``) and return None to pass it through.

    Failure is fail-closed: a raising callback aborts processing and the
    record must not be committed. Callbacks that prefer to be skipped on
    error wrap themselves with :func:`recast.domain.index.transform.fail_open`.
    """

    registry: TransformRegistry = field(default_factory=TransformRegistry)

    def register(
        self, index_name: str, callback: TransformCallback, priority: int = 0
    ) -> Subscription:
        """Add a callback to the invocation list of an index.

        Args:
            index_name: Index whose records the callback transforms.
            callback: Sync or async callable taking and returning an IndexRecord.
            priority: Lower values run first. Equal priorities run in
                registration order, so the default appends.

        Returns:
            Subscription handle for :meth:`unregister`.
        """
        subscription = self.registry.add(index_name, callback, priority)
        logger.debug(
            f"Registered transform {callback_name(callback)} on '{index_name}' "
            f"(priority={priority})"
        )
        return subscription

    def unregister(self, subscription: Subscription) -> None:
        """Remove a registration. Unknown or already removed handles are ignored."""
        if self.registry.remove(subscription):
            logger.debug(f"Unregistered transform {subscription.id} from '{subscription.index_name}'")

    async def process(self, index_name: str, record: IndexRecord) -> IndexRecord:
        """Run every transform registered for ``index_name`` over ``record``.

        Args:
            index_name: Index the record is about to be written to.
            record: The record as built by the indexer.

        Returns:
            The record to persist.

        Raises:
            TransformError: If a callback raises or returns something other
                than an IndexRecord or None.
        """
        current = record
        # Registrations made while this record is in flight apply to the next one.
        for registration in self.registry.snapshot(index_name):
            name = callback_name(registration.callback)
            try:
                result = registration.callback(current)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                logger.error(f"Transform {name} failed for {record.id} on '{index_name}': {e}")
                raise TransformError(
                    f"Transform {name} failed for record {record.id}: {e}",
                    index_name=index_name,
                    record_id=record.id,
                    callback=name,
                ) from e

            if result is None:
                continue
            if not isinstance(result, IndexRecord):
                raise TransformError(
                    f"Transform {name} returned {type(result).__name__}, expected IndexRecord",
                    index_name=index_name,
                    record_id=record.id,
                    callback=name,
                )
            current = result

        return current
